"""Initialise the configuration store, optionally from an exported snapshot."""
from __future__ import annotations

import argparse
import json
import pathlib
import sys

ROOT = pathlib.Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.site_config import create_app
from backend.site_config.services import get_config_manager


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--snapshot",
        type=pathlib.Path,
        help="JSON file produced by GET /api/config/export",
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="drop the stored configuration before seeding",
    )
    return parser.parse_args(argv)


def _read_snapshot(path: pathlib.Path) -> dict[str, object]:
    payload = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise RuntimeError(f"{path} does not contain a snapshot object")
    return payload


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    app = create_app()
    with app.app_context():
        manager = get_config_manager(app)
        if args.reset and not manager.reset():
            raise RuntimeError("Stored configuration could not be removed")

        imported = False
        if args.snapshot is not None:
            if not manager.import_snapshot(_read_snapshot(args.snapshot)):
                raise RuntimeError("Snapshot could not be written to the store")
            imported = True

        config = manager.load()

        print(
            "Seed completed",
            f"version={manager.version}",
            f"imported={int(imported)}",
            f"heroName={config.hero_name!r}",
        )


if __name__ == "__main__":
    main()
