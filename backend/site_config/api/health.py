"""Health check endpoint."""

from flask import Blueprint, jsonify

from ..services import get_config_manager

bp = Blueprint("health", __name__)


@bp.get("/health")
def health() -> tuple[dict[str, str], int]:
    """Return the service health status and the expected schema version."""
    return jsonify({"status": "ok", "configVersion": get_config_manager().version}), 200
