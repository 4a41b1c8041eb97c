"""Validation of configuration payloads submitted by the admin form."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from .schema import FIELD_KEYS

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def normalize_payload(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Keep known fields only and strip surrounding whitespace from text."""

    normalized: dict[str, Any] = {}
    for key in FIELD_KEYS:
        if key not in payload:
            continue
        value = payload[key]
        normalized[key] = value.strip() if isinstance(value, str) else value
    return normalized


def validate_admin_payload(payload: Mapping[str, Any]) -> tuple[dict[str, Any], list[str]]:
    """Validate and normalise a full admin submission.

    Returns the normalised payload and a list of user-facing error messages;
    nothing should be written while the list is non-empty.
    """

    data = normalize_payload(payload)
    errors: list[str] = []

    hero_name = data.get("heroName")
    if not isinstance(hero_name, str) or not hero_name:
        errors.append("Display name is required")

    email = data.get("contactEmail")
    if not isinstance(email, str) or not email:
        errors.append("Contact email is required")
    elif not EMAIL_PATTERN.match(email):
        errors.append("Please enter a valid email address")

    return data, errors
