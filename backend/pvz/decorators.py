# Overview: Request and permission decorators for API routes.

from functools import wraps
from flask import request, jsonify, g, current_app

from .permissions import allowed_roles, is_permitted, validate_operation_code
from .services import token_service
from .services.token_service import InvalidTokenError


def _is_authenticated() -> bool:
    return hasattr(g, 'role')


def require_auth(f):
    """
    Require a valid bearer token.

    Sets g.role to the role carried by the token.

    SECURITY: Returns 401 if:
    - No Authorization header, or not "Bearer <token>"
    - Invalid or expired token (one message for every reason)
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        auth_header = request.headers.get("Authorization")

        if not auth_header:
            return jsonify({"error": "Authorization header is required"}), 401

        parts = auth_header.split(" ")
        if len(parts) != 2 or parts[0] != "Bearer" or not parts[1]:
            return jsonify({"error": "Authorization header must be in format: Bearer {token}"}), 401

        try:
            role = token_service.validate_token(parts[1], current_app.config["JWT_SECRET"])
        except InvalidTokenError as e:
            return jsonify({"error": str(e)}), 401

        g.role = role

        return f(*args, **kwargs)

    return decorated_function


def require_permission(operation_code: str):
    """
    Require the authenticated role to be allowed for an operation.

    Allowed roles come from permissions.OPERATION_ROLES; must be stacked
    under @require_auth.
    """
    if not validate_operation_code(operation_code):
        raise ValueError(f"Unknown operation code: {operation_code}")

    roles = allowed_roles(operation_code)

    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            # Ensure @require_auth was called first
            if not _is_authenticated():
                return jsonify({"error": "User not authenticated"}), 401

            if not is_permitted(g.role, operation_code):
                return jsonify({
                    "error": "Operation not permitted for this user role",
                    "required_roles": sorted(roles),
                }), 403

            return f(*args, **kwargs)

        return decorated_function
    return decorator
