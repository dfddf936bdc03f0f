# Overview: Flask API routes for products; parses input and returns JSON responses.

from flask import Blueprint, request, jsonify, current_app

from ..decorators import require_auth, require_permission
from ..permissions import ADD_PRODUCT, DELETE_PRODUCT
from ..services import product_service
from ..validation import ConflictError, ValidationError, parse_uuid


products_bp = Blueprint("products", __name__)


@products_bp.post("/products")
@require_auth
@require_permission(ADD_PRODUCT)
def add_product_route():
    """
    Add a product to the open reception of a pickup point.

    Request body:
    {
        "type": "электроника" | "одежда" | "обувь",
        "pvzId": "<uuid>"
    }
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid request data"}), 400

    try:
        pvz_id = parse_uuid(data.get("pvzId"), "pvzId")
        product = product_service.add_product(pvz_id, data.get("type"))
        return jsonify(product.to_dict()), 201

    except (ValidationError, ConflictError) as e:
        return jsonify({"error": str(e)}), 400
    except Exception:
        current_app.logger.exception("Failed to add product")
        return jsonify({"error": "Internal server error"}), 500


@products_bp.post("/pvz/<pvz_id>/delete_last_product")
@require_auth
@require_permission(DELETE_PRODUCT)
def delete_last_product_route(pvz_id: str):
    """Remove the most recently added product (LIFO) of the open reception."""
    try:
        pvz_id = parse_uuid(pvz_id, "pvzId")
        product_service.remove_last_product(pvz_id)
        return jsonify({"message": "Last product deleted"}), 200

    except (ValidationError, ConflictError) as e:
        return jsonify({"error": str(e)}), 400
    except Exception:
        current_app.logger.exception("Failed to delete last product")
        return jsonify({"error": "Internal server error"}), 500
