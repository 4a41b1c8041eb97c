"""Default schema for the profile site configuration.

The schema is a closed set of fields. Each attribute of :class:`SiteConfig`
carries the key it is persisted and served under, so the stored record and
the JSON API keep the camelCase names used by the static page.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Final

# Bump when fields are added, removed or renamed; a mismatch with the stored
# token triggers a migration pass on the next load.
CONFIG_VERSION: Final[str] = "2.0"

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off", ""}


def _setting(default: Any, key: str) -> Any:
    return field(default=default, metadata={"key": key})


def _visibility(default: bool, key: str) -> Any:
    # Page visibility flags are tri-state: only an explicit false hides.
    return field(default=default, metadata={"key": key, "tri_state": True})


@dataclass(frozen=True)
class SiteConfig:
    """Typed record holding every editable site setting."""

    # identity / content
    hero_name: str = _setting("Rujita Munankarmi, FNP", "heroName")
    hero_subtitle: str = _setting(
        '<strong>Primary care</strong> with <span class="accent">CKD & hypertension</span>'
        " prevention and management",
        "heroSubtitle",
    )
    profile_image_url: str = _setting("assets/images/pfp.jpg", "profileImageUrl")

    # status
    accepting_patients: bool = _setting(False, "acceptingPatients")
    availability_status: str = _setting(
        "Please contact us to inquire about availability.", "availabilityStatus"
    )

    # presentation
    show_header_nav: bool = _visibility(False, "showHeaderNav")
    show_header_logo: bool = _visibility(False, "showHeaderLogo")
    show_hero_availability: bool = _visibility(False, "showHeroAvailability")
    show_hero_cta: bool = _visibility(False, "showHeroCTA")
    show_footer_copyright: bool = _visibility(True, "showFooterCopyright")
    banner_enabled: bool = _setting(False, "bannerEnabled")
    banner_text: str = _setting("", "bannerText")
    banner_type: str = _setting("info", "bannerType")
    theme: str = _setting("default", "theme")

    # contact
    business_name: str = _setting("CarenexLLC", "businessName")
    contact_email: str = _setting("carenex.np@gmail.com", "contactEmail")
    location: str = _setting("Harford County, Maryland", "location")
    show_contact_business: bool = _visibility(False, "showContactBusiness")
    show_contact_location: bool = _visibility(True, "showContactLocation")
    show_contact_email: bool = _visibility(True, "showContactEmail")
    show_contact_availability: bool = _visibility(True, "showContactAvailability")

    def as_dict(self) -> dict[str, Any]:
        """Return the record keyed by persisted field names."""

        return {key: getattr(self, attr) for attr, key in _ATTRIBUTE_KEYS.items()}

    def merged(self, updates: Mapping[str, Any]) -> SiteConfig:
        """Return a copy with ``updates`` (persisted keys) applied on top."""

        values = self.as_dict()
        values.update(updates)
        return SiteConfig.from_mapping(values)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> SiteConfig:
        """Build a record from persisted keys.

        Unknown keys are dropped, missing keys take their default, and a value
        whose type does not fit the field falls back to the default. A
        visibility flag is only off for ``False`` or a false-like string.
        """

        kwargs: dict[str, Any] = {}
        for attr, key in _ATTRIBUTE_KEYS.items():
            if key in data:
                if attr in _TRI_STATE:
                    kwargs[attr] = _coerce_visibility(data[key])
                else:
                    kwargs[attr] = _coerce(data[key], _DEFAULTS[attr])
        return cls(**kwargs)


_ATTRIBUTE_KEYS: Final[dict[str, str]] = {
    f.name: f.metadata["key"] for f in dataclasses.fields(SiteConfig)
}
_DEFAULTS: Final[dict[str, Any]] = {
    f.name: f.default for f in dataclasses.fields(SiteConfig)
}

_TRI_STATE: Final[frozenset[str]] = frozenset(
    f.name for f in dataclasses.fields(SiteConfig) if f.metadata.get("tri_state")
)

FIELD_KEYS: Final[tuple[str, ...]] = tuple(_ATTRIBUTE_KEYS.values())


def _coerce(value: Any, default: Any) -> Any:
    if isinstance(default, bool):
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in _TRUE_STRINGS:
                return True
            if lowered in _FALSE_STRINGS:
                return False
            return default
        if isinstance(value, (int, float)):
            return value != 0
        return default
    if isinstance(value, str):
        return value
    return default


def _coerce_visibility(value: Any) -> bool:
    if value is False:
        return False
    if isinstance(value, str) and value.strip().lower() in _FALSE_STRINGS:
        return False
    return True


def default_config() -> SiteConfig:
    """Return a new record holding the default of every field."""

    return SiteConfig()


def default_values() -> dict[str, Any]:
    """Return a new mapping of persisted key to default value."""

    return SiteConfig().as_dict()


def storage_key(attribute: str) -> str:
    """Return the persisted key of a :class:`SiteConfig` attribute."""

    return _ATTRIBUTE_KEYS[attribute]


@dataclass(frozen=True)
class LegacyRewrite:
    """Replace a stale literal value of one field with its current value."""

    field: str
    old: Any
    new: Any

    def apply(self, values: dict[str, Any]) -> bool:
        """Rewrite ``values`` in place; return whether anything changed."""

        if self.field in values and values[self.field] == self.old:
            values[self.field] = self.new
            return True
        return False


LEGACY_REWRITES: Final[tuple[LegacyRewrite, ...]] = (
    LegacyRewrite(
        field="location",
        old="Bel Air, Maryland (serving surrounding communities)",
        new="Harford County, Maryland",
    ),
    LegacyRewrite(field="heroName", old="Jane Doe, FNP", new="Rujita Munankarmi, FNP"),
    LegacyRewrite(field="businessName", old="dummyLLC", new="CarenexLLC"),
    LegacyRewrite(
        field="contactEmail", old="contact@dummyllc.com", new="carenex.np@gmail.com"
    ),
    LegacyRewrite(
        field="profileImageUrl",
        old="assets/images/placeholder-profile.svg",
        new="assets/images/pfp.jpg",
    ),
)


def check_rewrites(rewrites: tuple[LegacyRewrite, ...]) -> None:
    """Raise ``ValueError`` when a rewrite rule names a field outside the schema."""

    for rule in rewrites:
        if rule.field not in FIELD_KEYS:
            raise ValueError(f"legacy rewrite targets unknown field {rule.field!r}")


check_rewrites(LEGACY_REWRITES)
