"""Endpoints exposing the profile image discovery."""

from __future__ import annotations

import asyncio
from http import HTTPStatus

from flask import Blueprint, current_app, jsonify

from ..extensions import limiter
from ..services import get_config_manager

bp = Blueprint("images", __name__)


def profile_image_rate_limit() -> str:
    return current_app.config.get("PROFILE_IMAGE_RATE_LIMIT") or "30 per minute"


@bp.get("/profile-image")
@limiter.limit(profile_image_rate_limit)
def get_profile_image() -> tuple[object, int]:
    """Return the newest numbered profile image, or the placeholder."""

    prober = get_config_manager().prober
    path = asyncio.run(prober.resolve_latest_numbered_image())
    return jsonify({"path": path}), HTTPStatus.OK


@bp.delete("/profile-image/cache")
def clear_profile_image_cache() -> tuple[object, int]:
    get_config_manager().prober.clear_cache()
    return "", HTTPStatus.NO_CONTENT
