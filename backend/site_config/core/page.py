"""Projection of a configuration onto the elements of the profile page."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .schema import SiteConfig

# Element id on the page -> field controlling its visibility.
VISIBILITY_TARGETS: dict[str, str] = {
    "header-logo": "showHeaderLogo",
    "header-nav": "showHeaderNav",
    "hero-availability": "showHeroAvailability",
    "hero-cta": "showHeroCTA",
    "footer-copyright": "showFooterCopyright",
    "contact-field-business": "showContactBusiness",
    "contact-field-location": "showContactLocation",
    "contact-field-email": "showContactEmail",
    "contact-field-availability": "showContactAvailability",
}


def is_visible(value: Any) -> bool:
    """Visibility flags hide an element only when explicitly ``False``."""

    return value is not False


def visibility(values: Mapping[str, Any]) -> dict[str, bool]:
    return {
        target: is_visible(values.get(key)) for target, key in VISIBILITY_TARGETS.items()
    }


def theme_class(theme: str) -> str | None:
    if not theme or theme == "default":
        return None
    return f"theme-{theme}"


def build_page_view(config: SiteConfig, profile_image: str) -> dict[str, Any]:
    """Return what the page renderer applies for ``config``."""

    mailto = f"mailto:{config.contact_email}" if config.contact_email else None
    banner_visible = config.banner_enabled and bool(config.banner_text)
    return {
        "banner": {
            "visible": banner_visible,
            "text": config.banner_text if banner_visible else "",
            "className": f"urgent-banner {config.banner_type}",
        },
        "themeClass": theme_class(config.theme),
        "hero": {
            "name": config.hero_name,
            "subtitleHtml": config.hero_subtitle,
            "availability": config.availability_status,
            "acceptingBadge": config.accepting_patients,
            "consultationHref": mailto,
        },
        "profileImage": {
            "src": profile_image,
            "alt": config.hero_name or "Profile",
        },
        "contact": {
            "businessName": config.business_name,
            "location": config.location,
            "email": config.contact_email,
            "emailHref": mailto,
            "availability": config.availability_status,
        },
        "visibility": visibility(config.as_dict()),
    }
