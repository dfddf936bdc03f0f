# Overview: Flask API routes for auth operations; parses input and returns JSON responses.

# backend/pvz/routes/auth.py
"""
Authentication API routes

- POST /dummyLogin: token for a role, no credentials (test convenience)
- POST /register: create a user
- POST /login: exchange email/password for a token

Token responses also carry "Authorization: Bearer <token>" as a header.
"""

from flask import Blueprint, request, jsonify, current_app

from ..services import auth_service
from ..services.auth_service import InvalidCredentialsError
from ..validation import ConflictError, ValidationError


auth_bp = Blueprint("auth", __name__)


def _token_response(token: str):
    response = jsonify({"token": token})
    response.headers["Authorization"] = f"Bearer {token}"
    return response, 200


@auth_bp.post("/dummyLogin")
def dummy_login_route():
    """
    Request body:
    {
        "role": "employee" | "moderator"
    }
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid role. Must be 'employee' or 'moderator'"}), 400

    try:
        token = auth_service.dummy_login(data.get("role"))
        return _token_response(token)

    except ValidationError:
        return jsonify({"error": "Invalid role. Must be 'employee' or 'moderator'"}), 400
    except Exception:
        current_app.logger.exception("Failed to issue dummy token")
        return jsonify({"error": "Failed to generate token"}), 500


@auth_bp.post("/register")
def register_route():
    """
    Request body:
    {
        "email": "user@example.com",
        "password": "secret1",    // 6+ characters
        "role": "employee"
    }
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid request data"}), 400

    try:
        user = auth_service.register_user(
            email=data.get("email"),
            password=data.get("password"),
            role=data.get("role"),
        )
        current_app.logger.info("Registered user %s with role %s", user.id, user.role)
        return jsonify(user.to_dict()), 201

    except (ValidationError, ConflictError) as e:
        return jsonify({"error": str(e)}), 400
    except Exception:
        current_app.logger.exception("Failed to register user")
        return jsonify({"error": "Internal server error"}), 500


@auth_bp.post("/login")
def login_route():
    """
    Request body:
    {
        "email": "user@example.com",
        "password": "secret1"
    }
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid request data"}), 400

    email = data.get("email")
    password = data.get("password")

    if not email or not password or not isinstance(email, str) or not isinstance(password, str):
        return jsonify({"error": "Invalid request data"}), 400

    try:
        token = auth_service.login(email, password)
        return _token_response(token)

    except InvalidCredentialsError as e:
        return jsonify({"error": str(e)}), 401
    except Exception:
        current_app.logger.exception("Failed to login user")
        return jsonify({"error": "Internal server error"}), 500
