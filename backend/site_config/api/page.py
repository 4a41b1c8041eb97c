"""Render-ready view of the configuration for the profile page."""

from __future__ import annotations

import asyncio
from http import HTTPStatus

from flask import Blueprint, current_app, jsonify

from ..core.page import build_page_view
from ..extensions import limiter
from ..services import get_config_manager

bp = Blueprint("page", __name__)


def page_rate_limit() -> str:
    return current_app.config.get("PAGE_RATE_LIMIT") or "120 per minute"


@bp.get("/page")
@limiter.limit(page_rate_limit)
def get_page() -> tuple[object, int]:
    manager = get_config_manager()
    config = manager.load()
    image = asyncio.run(manager.resolve_profile_image(config))
    return jsonify(build_page_view(config, image)), HTTPStatus.OK
