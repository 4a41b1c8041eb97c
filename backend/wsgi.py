"""WSGI entry point for the site configuration service."""

from __future__ import annotations

import os

from site_app import create_app

app = create_app()

if __name__ == "__main__":  # pragma: no cover - manual runtime entrypoint
    port_env = os.getenv("SITE_CONFIG_API_PORT") or os.getenv("PORT")
    port = int(port_env) if port_env else 9200
    app.run(host="127.0.0.1", port=port)
