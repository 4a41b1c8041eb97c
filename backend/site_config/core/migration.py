"""Reconcile a persisted configuration blob with the current schema."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from .schema import LegacyRewrite

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MigrationResult:
    """Outcome of a migration pass.

    ``dirty`` means ``values`` differ from what is stored and must be written
    back together with the current version token. ``write_version`` alone
    means only the version token needs (re)initialising.
    """

    values: dict[str, Any]
    dirty: bool
    write_version: bool


def decode_blob(text: str | None) -> dict[str, Any] | None:
    """Parse a persisted blob; corrupt or non-object payloads count as absent."""

    if not text:
        return None
    try:
        parsed = json.loads(text)
    except (TypeError, ValueError) as exc:
        logger.warning("Discarding unreadable configuration blob: %s", exc)
        return None
    if not isinstance(parsed, dict):
        logger.warning(
            "Discarding configuration blob of type %s", type(parsed).__name__
        )
        return None
    return parsed


def migrate(
    blob: Mapping[str, Any] | None,
    stored_version: str | None,
    current_version: str,
    defaults: Mapping[str, Any],
    rewrites: Iterable[LegacyRewrite],
) -> MigrationResult:
    """Merge ``blob`` over ``defaults`` and heal outdated values.

    On a version mismatch only keys known to ``defaults`` survive. Legacy
    rewrites run on every pass whatever the version.
    """

    version_changed = stored_version != current_version

    if blob is None:
        return MigrationResult(
            values=dict(defaults), dirty=False, write_version=version_changed
        )

    dirty = False
    if version_changed:
        values = dict(defaults)
        values.update((key, value) for key, value in blob.items() if key in defaults)
        dirty = True
    else:
        values = {**defaults, **blob}

    for rule in rewrites:
        if rule.apply(values):
            logger.info("Rewrote legacy value of %s", rule.field)
            dirty = True

    return MigrationResult(values=values, dirty=dirty, write_version=dirty)
