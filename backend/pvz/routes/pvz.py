# Overview: Flask API routes for pickup points; parses input and returns JSON responses.

# backend/pvz/routes/pvz.py
"""
Pickup Point API Routes

- POST /pvz: register a pickup point (moderator)
- GET /pvz: paginated nested view with receptions and products
  (employee, moderator)
"""

from flask import Blueprint, request, jsonify, current_app

from ..decorators import require_auth, require_permission
from ..permissions import CREATE_PVZ, LIST_PVZ
from ..services import aggregation_service, pvz_service
from ..services.aggregation_service import AggregationError
from ..validation import ValidationError, parse_pagination


pvz_bp = Blueprint("pvz", __name__, url_prefix="/pvz")


@pvz_bp.post("")
@require_auth
@require_permission(CREATE_PVZ)
def create_pvz_route():
    """
    Register a new pickup point.

    Request body:
    {
        "city": "Москва" | "Санкт-Петербург" | "Казань"
    }

    registrationDate is always assigned by the server; a client-supplied
    value is ignored.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid request data"}), 400

    try:
        pickup_point = pvz_service.create_pickup_point(data.get("city"))
        current_app.logger.info("Created pvz %s in %s", pickup_point.id, pickup_point.city)
        return jsonify(pickup_point.to_dict()), 201

    except ValidationError as e:
        return jsonify({"error": str(e)}), 400
    except Exception:
        current_app.logger.exception("Failed to create pvz")
        return jsonify({"error": "Internal server error"}), 500


@pvz_bp.get("")
@require_auth
@require_permission(LIST_PVZ)
def list_pvz_route():
    """
    Query params:
        startDate, endDate: ISO-8601, filter on reception dateTime (inclusive)
        page: >= 1 (default 1)
        limit: 1..30 (default 10)
    """
    try:
        query = parse_pagination(request.args)
    except ValidationError as e:
        return jsonify({"error": str(e)}), 400

    try:
        result = aggregation_service.list_pickup_points(
            start_date=query.start_date,
            end_date=query.end_date,
            page=query.page,
            limit=query.limit,
        )
        return jsonify(result), 200

    except AggregationError as e:
        current_app.logger.exception("Failed to list pvz")
        return jsonify({"error": str(e)}), 500
