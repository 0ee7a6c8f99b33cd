"""Tests for autoext.settings."""

from autoext.settings import get_default_settings, get_setting, merge_settings


def test_defaults() -> None:
    settings = get_default_settings()
    assert get_setting(settings, "extensions.autodetection.enabled") is False
    assert get_setting(settings, "extensions.autodetection.gate") == "static"
    assert get_setting(settings, "extensions.autodetection.entry_point_group") == "autoext.extensions"


def test_default_settings_are_copies() -> None:
    a = get_default_settings()
    a["extensions"]["autodetection"]["enabled"] = True
    assert get_default_settings()["extensions"]["autodetection"]["enabled"] is False


def test_merge_overlay_keeps_other_defaults() -> None:
    settings = merge_settings({"extensions": {"autodetection": {"enabled": True}}})
    assert get_setting(settings, "extensions.autodetection.enabled") is True
    assert get_setting(settings, "extensions.autodetection.gate") == "static"


def test_merge_ignores_none() -> None:
    settings = merge_settings({"extensions": {"autodetection": {"gate": None}}})
    assert get_setting(settings, "extensions.autodetection.gate") == "static"


def test_merge_does_not_alias_overlay() -> None:
    overlay = {"custom": {"k": "v"}}
    settings = merge_settings(overlay)
    settings["custom"]["k"] = "changed"
    assert overlay["custom"]["k"] == "v"


def test_get_setting_missing_returns_default() -> None:
    assert get_setting({}, "a.b", default=7) == 7
    assert get_setting({"a": "scalar"}, "a.b") is None


def test_merge_leaves_defaults_untouched() -> None:
    merge_settings({"extensions": {"autodetection": {"enabled": True, "gate": "dynamic"}}})
    assert get_setting(get_default_settings(), "extensions.autodetection.enabled") is False
    assert get_setting(merge_settings(), "extensions.autodetection.gate") == "static"


def test_merge_overlay_replaces_scalar_with_mapping() -> None:
    settings = merge_settings({"extensions": {"autodetection": {"gate": {"kind": "static"}}}})
    assert get_setting(settings, "extensions.autodetection.gate.kind") == "static"
