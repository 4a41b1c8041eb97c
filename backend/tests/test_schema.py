"""Tests for the default schema and the typed configuration record."""

from __future__ import annotations

import pytest

from backend.site_config.core.schema import (
    CONFIG_VERSION,
    FIELD_KEYS,
    LEGACY_REWRITES,
    LegacyRewrite,
    SiteConfig,
    check_rewrites,
    default_config,
    default_values,
    storage_key,
)


def test_default_values_are_independent_copies():
    first = default_values()
    second = default_values()

    assert first == second
    assert first is not second

    first["heroName"] = "Changed"
    assert default_values()["heroName"] == "Rujita Munankarmi, FNP"


def test_default_record_covers_every_field():
    values = default_config().as_dict()

    assert tuple(values) == FIELD_KEYS
    assert len(FIELD_KEYS) == 21
    assert values["theme"] == "default"
    assert values["bannerEnabled"] is False
    assert values["showFooterCopyright"] is True
    assert values["location"] == "Harford County, Maryland"
    assert CONFIG_VERSION == "2.0"


def test_storage_keys_follow_page_names():
    assert storage_key("hero_name") == "heroName"
    assert storage_key("show_hero_cta") == "showHeroCTA"
    assert storage_key("accepting_patients") == "acceptingPatients"


def test_from_mapping_drops_unknown_and_fills_missing():
    config = SiteConfig.from_mapping({"theme": "winter", "heroTagline": "old field"})

    values = config.as_dict()
    assert values["theme"] == "winter"
    assert "heroTagline" not in values
    assert values["contactEmail"] == "carenex.np@gmail.com"


def test_from_mapping_coerces_mistyped_values():
    config = SiteConfig.from_mapping(
        {
            "bannerEnabled": "true",
            "acceptingPatients": 0,
            "showHeaderNav": "sometimes",
            "showHeroCTA": "off",
            "heroName": None,
            "bannerText": 42,
        }
    )

    assert config.banner_enabled is True
    assert config.accepting_patients is False
    assert config.show_header_nav is True
    assert config.show_hero_cta is False
    assert config.hero_name == "Rujita Munankarmi, FNP"
    assert config.banner_text == ""


def test_merged_returns_new_record():
    base = default_config()
    updated = base.merged({"bannerEnabled": True, "bannerText": "Closed Friday"})

    assert updated is not base
    assert updated.banner_enabled is True
    assert updated.banner_text == "Closed Friday"
    assert base.banner_enabled is False


def test_legacy_rewrite_is_idempotent():
    rule = LegacyRewrite(field="businessName", old="dummyLLC", new="CarenexLLC")
    values = {"businessName": "dummyLLC"}

    assert rule.apply(values) is True
    assert values == {"businessName": "CarenexLLC"}
    assert rule.apply(values) is False
    assert values == {"businessName": "CarenexLLC"}


def test_rewrite_table_targets_known_fields():
    check_rewrites(LEGACY_REWRITES)

    with pytest.raises(ValueError):
        check_rewrites((LegacyRewrite(field="heroTagline", old="a", new="b"),))


@pytest.mark.parametrize("value", [None, 0, "sometimes", 1, "true", {}])
def test_visibility_flags_only_hide_on_false(value):
    config = SiteConfig.from_mapping({"showHeaderNav": value, "showFooterCopyright": value})

    assert config.show_header_nav is True
    assert config.show_footer_copyright is True


@pytest.mark.parametrize("value", [False, "false", "off", "0", ""])
def test_visibility_flags_hidden_by_false_values(value):
    config = SiteConfig.from_mapping({"showContactEmail": value})

    assert config.show_contact_email is False
