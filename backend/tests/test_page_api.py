"""Tests for the page view and profile image endpoints."""

from __future__ import annotations

import pytest

from backend.site_config.core.page import build_page_view, is_visible, theme_class
from backend.site_config.core.schema import default_config
from backend.site_config.images import IMAGE_CACHE_KEY
from backend.site_config.models.settings import AppSetting

PLACEHOLDER = "assets/images/placeholder-profile.svg"


@pytest.fixture()
def numbered_images(image_root):
    images = image_root / "assets" / "images"
    images.mkdir(parents=True, exist_ok=True)
    created = []
    for index in (1, 2):
        path = images / f"pfp{index}.jpg"
        path.write_bytes(b"\xff\xd8\xff")
        created.append(path)
    yield created
    for path in created:
        path.unlink()


def test_visibility_is_tri_state():
    assert is_visible(True) is True
    assert is_visible(None) is True
    assert is_visible("") is True
    assert is_visible(False) is False


def test_theme_class():
    assert theme_class("default") is None
    assert theme_class("") is None
    assert theme_class("winter") == "theme-winter"


def test_page_view_projection():
    config = default_config().merged(
        {
            "bannerEnabled": True,
            "bannerText": "Closed for the holidays",
            "bannerType": "warning",
            "theme": "winter",
            "acceptingPatients": True,
            "showHeaderNav": False,
            "showFooterCopyright": True,
        }
    )

    view = build_page_view(config, "assets/images/pfp3.jpg")

    assert view["banner"] == {
        "visible": True,
        "text": "Closed for the holidays",
        "className": "urgent-banner warning",
    }
    assert view["themeClass"] == "theme-winter"
    assert view["hero"]["acceptingBadge"] is True
    assert view["hero"]["consultationHref"] == "mailto:carenex.np@gmail.com"
    assert view["profileImage"] == {
        "src": "assets/images/pfp3.jpg",
        "alt": "Rujita Munankarmi, FNP",
    }
    assert view["visibility"]["header-nav"] is False
    assert view["visibility"]["footer-copyright"] is True


def test_banner_without_text_stays_hidden():
    config = default_config().merged({"bannerEnabled": True, "bannerText": ""})

    assert build_page_view(config, PLACEHOLDER)["banner"]["visible"] is False


def test_profile_image_endpoint_finds_latest(client, numbered_images):
    response = client.get("/api/profile-image")

    assert response.status_code == 200
    assert response.get_json() == {"path": "assets/images/pfp2.jpg"}
    cached = AppSetting.query.filter_by(key=IMAGE_CACHE_KEY).first()
    assert cached is not None
    assert cached.value == "assets/images/pfp2.jpg"


def test_profile_image_endpoint_falls_back_to_placeholder(client):
    response = client.get("/api/profile-image")

    assert response.status_code == 200
    assert response.get_json() == {"path": PLACEHOLDER}


def test_clearing_image_cache(client, numbered_images):
    client.get("/api/profile-image")

    response = client.delete("/api/profile-image/cache")

    assert response.status_code == 204
    assert AppSetting.query.filter_by(key=IMAGE_CACHE_KEY).first() is None


def test_page_endpoint_uses_resolved_image(client, numbered_images):
    client.patch("/api/config", json={"theme": "spring", "showHeaderLogo": False})

    response = client.get("/api/page")

    assert response.status_code == 200
    view = response.get_json()
    assert view["themeClass"] == "theme-spring"
    assert view["profileImage"]["src"] == "assets/images/pfp2.jpg"
    assert view["visibility"]["header-logo"] is False
    assert view["visibility"]["contact-field-email"] is True


def test_page_endpoint_keeps_custom_image(client):
    client.patch("/api/config", json={"profileImageUrl": "uploads/portrait.png"})

    response = client.get("/api/page")

    assert response.get_json()["profileImage"]["src"] == "uploads/portrait.png"
