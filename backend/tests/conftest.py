from __future__ import annotations

import pathlib
import sys

import pytest
from sqlalchemy.pool import StaticPool

ROOT = pathlib.Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def _load_dependencies():
    from site_app import Config, create_app
    from backend.site_config.extensions import db

    return Config, create_app, db


ConfigBase, create_app, db = _load_dependencies()


class TestConfig(ConfigBase):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite+pysqlite:///:memory:"
    SQLALCHEMY_ENGINE_OPTIONS = {
        "poolclass": StaticPool,
        "connect_args": {"check_same_thread": False},
    }
    CORS_ALLOWED_ORIGINS = "http://localhost"
    IMAGE_BASE_URL = ""
    IMAGE_PROBE_TIMEOUT = 0.5


def make_test_config(**overrides: object) -> type[TestConfig]:
    """Return a ``TestConfig`` subclass with the given settings replaced."""

    return type("ModuleTestConfig", (TestConfig,), dict(overrides))


@pytest.fixture(scope="module")
def image_root(tmp_path_factory):
    return tmp_path_factory.mktemp("static")


@pytest.fixture(scope="module")
def app(image_root):
    app = create_app(make_test_config(IMAGE_ROOT=str(image_root)))
    ctx = app.app_context()
    ctx.push()
    yield app
    db.session.remove()
    ctx.pop()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture(autouse=True)
def cleanup_settings(request):
    yield

    if "app" not in request.fixturenames:
        return
    from backend.site_config.models.settings import AppSetting

    db.session.query(AppSetting).delete()
    db.session.commit()
