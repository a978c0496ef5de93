"""Tests for platpick.config.validation."""

from __future__ import annotations

from pathlib import Path

from platpick.config.validation import (
    ValidationSeverity,
    _suggest_key,
    validate_config,
    validate_config_file,
)


class TestSuggestKey:
    """Tests for _suggest_key function."""

    def test_suggests_typo_fix(self) -> None:
        assert _suggest_key("prefer_lockd", {"prefer_locked", "platform"}) == "prefer_locked"

    def test_returns_none_for_no_match(self) -> None:
        assert _suggest_key("xyz", {"platform", "output"}) is None


class TestValidateConfig:
    """Tests for validate_config function."""

    def test_valid_config_returns_no_warnings(self) -> None:
        data = {
            "platform": "x86_64-linux",
            "force_generic": False,
            "prefer_locked": True,
            "output": {"format": "json"},
        }
        assert validate_config(data, source="test.yml") == []

    def test_warns_on_unknown_top_level_key(self) -> None:
        warnings = validate_config({"force_ruby_platform": True}, source="test.yml")
        assert len(warnings) == 1
        assert warnings[0].key == "force_ruby_platform"
        assert warnings[0].is_error is False

    def test_suggests_close_key(self) -> None:
        warnings = validate_config({"prefer_lock": True}, source="test.yml")
        assert warnings[0].suggestion == "prefer_locked"

    def test_boolean_type_error(self) -> None:
        warnings = validate_config({"force_generic": "yes"}, source="test.yml")
        assert len(warnings) == 1
        assert warnings[0].is_error is True
        assert "must be a boolean" in warnings[0].message

    def test_platform_type_error(self) -> None:
        warnings = validate_config({"platform": 64}, source="test.yml")
        assert warnings[0].is_error is True

    def test_unknown_platform_os_warns(self) -> None:
        warnings = validate_config({"platform": "x86_64-plan9"}, source="test.yml")
        assert len(warnings) == 1
        assert warnings[0].is_error is False
        assert "Unrecognized operating system" in warnings[0].message

    def test_invalid_output_format(self) -> None:
        warnings = validate_config({"output": {"format": "jsn"}}, source="test.yml")
        assert warnings[0].is_error is True
        assert warnings[0].suggestion == "json"

    def test_output_must_be_mapping(self) -> None:
        warnings = validate_config({"output": "json"}, source="test.yml")
        assert warnings[0].key == "output"
        assert warnings[0].is_error is True

    def test_non_mapping(self) -> None:
        warnings = validate_config(["platform"], source="test.yml")  # type: ignore[arg-type]
        assert warnings[0].is_error is True


class TestValidateConfigFile:
    """Tests for validate_config_file."""

    def test_missing_file(self, tmp_path: Path) -> None:
        is_valid, issues = validate_config_file(tmp_path / "platpick.yml")
        assert is_valid is False
        assert issues[0].severity == ValidationSeverity.ERROR

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "platpick.yml"
        path.write_text("platform: [unclosed\n")
        is_valid, issues = validate_config_file(path)
        assert is_valid is False
        assert "Invalid YAML" in issues[0].message

    def test_empty_file_is_valid_with_warning(self, tmp_path: Path) -> None:
        path = tmp_path / "platpick.yml"
        path.write_text("")
        is_valid, issues = validate_config_file(path)
        assert is_valid is True
        assert issues[0].severity == ValidationSeverity.WARNING

    def test_unknown_key_is_warning(self, tmp_path: Path) -> None:
        path = tmp_path / "platpick.yml"
        path.write_text("platfrom: java\n")
        is_valid, issues = validate_config_file(path)
        assert is_valid is True
        assert issues[0].severity == ValidationSeverity.WARNING
        assert issues[0].suggestion == "platform"

    def test_type_error_is_error(self, tmp_path: Path) -> None:
        path = tmp_path / "platpick.yml"
        path.write_text("prefer_locked: maybe\n")
        is_valid, issues = validate_config_file(path)
        assert is_valid is False
        assert issues[0].severity == ValidationSeverity.ERROR


class TestValidKeys:
    """Tests for the accepted key set."""

    def test_every_top_level_key_is_read_by_the_loader(self) -> None:
        from platpick.config.validation import VALID_TOP_LEVEL_KEYS

        assert VALID_TOP_LEVEL_KEYS == {"platform", "force_generic", "prefer_locked", "output"}

    def test_version_key_is_unknown(self) -> None:
        warnings = validate_config({"version": 1}, source="test.yml")
        assert [w.key for w in warnings] == ["version"]
        assert warnings[0].is_error is False
