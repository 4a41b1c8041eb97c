"""REST endpoints for reading and editing the site configuration."""

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, current_app, jsonify, request

from ..core.validation import normalize_payload, validate_admin_payload
from ..services import get_config_manager

bp = Blueprint("config", __name__)


def _json_error(message: str, status: HTTPStatus = HTTPStatus.BAD_REQUEST):
    return jsonify({"error": message}), status


def _require_object() -> dict[str, object] | None:
    payload = request.get_json(force=True, silent=True)
    if not isinstance(payload, dict):
        return None
    return payload


def _save_failed():
    current_app.logger.error("Site configuration could not be written to the store")
    return _json_error(
        "Error saving configuration. Please try again.", HTTPStatus.INTERNAL_SERVER_ERROR
    )


@bp.get("/config")
def get_config() -> tuple[object, int]:
    return jsonify(get_config_manager().load().as_dict()), HTTPStatus.OK


@bp.get("/config/defaults")
def get_defaults() -> tuple[object, int]:
    return jsonify(get_config_manager().defaults().as_dict()), HTTPStatus.OK


@bp.put("/config")
def replace_config() -> tuple[object, int]:
    """Save a full admin form submission."""

    payload = _require_object()
    if payload is None:
        return _json_error("payload must be an object")

    data, errors = validate_admin_payload(payload)
    if errors:
        return jsonify({"errors": errors}), HTTPStatus.BAD_REQUEST

    manager = get_config_manager()
    if not manager.save(data):
        return _save_failed()
    return jsonify(manager.load().as_dict()), HTTPStatus.OK


@bp.patch("/config")
def patch_config() -> tuple[object, int]:
    """Change some fields and keep the others."""

    payload = _require_object()
    if payload is None:
        return _json_error("payload must be an object")

    updates = normalize_payload(payload)
    manager = get_config_manager()
    _, errors = validate_admin_payload(manager.load().merged(updates).as_dict())
    if errors:
        return jsonify({"errors": errors}), HTTPStatus.BAD_REQUEST

    if not manager.update(updates):
        return _save_failed()
    return jsonify(manager.load().as_dict()), HTTPStatus.OK


@bp.delete("/config")
def reset_config() -> tuple[object, int]:
    if not get_config_manager().reset():
        return _json_error(
            "Error resetting configuration.", HTTPStatus.INTERNAL_SERVER_ERROR
        )
    return "", HTTPStatus.NO_CONTENT


@bp.post("/config/refresh")
def refresh_config() -> tuple[object, int]:
    return jsonify(get_config_manager().force_refresh().as_dict()), HTTPStatus.OK


@bp.get("/config/export")
def export_config() -> tuple[object, int]:
    """Return a versioned snapshot of the configuration."""

    return jsonify(get_config_manager().export_snapshot()), HTTPStatus.OK


@bp.post("/config/import")
def import_config() -> tuple[object, int]:
    """Store a snapshot, migrating it from the version it carries."""

    payload = _require_object()
    if payload is None:
        return _json_error("payload must be an object")

    manager = get_config_manager()
    try:
        stored = manager.import_snapshot(payload)
    except ValueError as exc:
        return _json_error(str(exc))
    if not stored:
        return _save_failed()
    return jsonify(manager.load().as_dict()), HTTPStatus.OK
