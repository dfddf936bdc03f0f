# Overview: Flask API routes for receptions; parses input and returns JSON responses.

# backend/pvz/routes/receptions.py
"""
Reception API Routes

Lifecycle: open -> close (immutable once closed). Employees only.
"""

from flask import Blueprint, request, jsonify, current_app

from ..decorators import require_auth, require_permission
from ..permissions import CLOSE_RECEPTION, OPEN_RECEPTION
from ..services import reception_service
from ..validation import ConflictError, NotFoundError, ValidationError, parse_uuid


receptions_bp = Blueprint("receptions", __name__)


@receptions_bp.post("/receptions")
@require_auth
@require_permission(OPEN_RECEPTION)
def open_reception_route():
    """
    Open a reception on a pickup point.

    Request body:
    {
        "pvzId": "<uuid>"
    }

    Returns 400 if the pickup point already has an open reception.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid request data"}), 400

    try:
        pvz_id = parse_uuid(data.get("pvzId"), "pvzId")
        reception = reception_service.open_reception(pvz_id)
        current_app.logger.info("Opened reception %s on pvz %s", reception.id, pvz_id)
        return jsonify(reception.to_dict()), 201

    except NotFoundError as e:
        return jsonify({"error": str(e)}), 404
    except (ValidationError, ConflictError) as e:
        return jsonify({"error": str(e)}), 400
    except Exception:
        current_app.logger.exception("Failed to open reception")
        return jsonify({"error": "Internal server error"}), 500


@receptions_bp.post("/pvz/<pvz_id>/close_last_reception")
@require_auth
@require_permission(CLOSE_RECEPTION)
def close_last_reception_route(pvz_id: str):
    """
    Close the open reception of a pickup point.

    Returns 400 if nothing is open (including a concurrent close that won).
    """
    try:
        pvz_id = parse_uuid(pvz_id, "pvzId")
        reception = reception_service.close_last_open_reception(pvz_id)
        current_app.logger.info("Closed reception %s on pvz %s", reception.id, pvz_id)
        return jsonify(reception.to_dict()), 200

    except (ValidationError, ConflictError) as e:
        return jsonify({"error": str(e)}), 400
    except Exception:
        current_app.logger.exception("Failed to close reception")
        return jsonify({"error": "Internal server error"}), 500
