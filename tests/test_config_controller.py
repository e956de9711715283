"""Tests for YAML configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from config.controller import ConfigController, ConfigError


def test_packaged_defaults() -> None:
    settings = ConfigController().get_settings()

    assert settings.check_name == "SNMP_HOST"
    assert settings.ping_count == 4
    assert settings.ping_timeout_s == 1
    assert settings.snmp_version == "1"
    assert settings.snmp_retries == 2
    assert settings.snmp_timeout_s == 5
    assert settings.tool_paths[0] == "/usr/bin/snmpget"


def test_override_is_deep_merged(tmp_path: Path) -> None:
    override = tmp_path / "override.yaml"
    override.write_text(
        "\n".join(
            [
                "check_name: AIX_SNMP",
                "snmp:",
                "  tool_paths: /opt/bin/snmpget",
            ]
        ),
        encoding="utf-8",
    )

    settings = ConfigController(override_file=override).get_settings()

    assert settings.check_name == "AIX_SNMP"
    assert settings.tool_paths == ("/opt/bin/snmpget",)
    assert settings.snmp_retries == 2
    assert settings.ping_count == 4


def test_empty_override_keeps_defaults(tmp_path: Path) -> None:
    override = tmp_path / "override.yaml"
    override.write_text("", encoding="utf-8")

    settings = ConfigController(override_file=override).get_settings()

    assert settings.check_name == "SNMP_HOST"


def test_missing_override_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        ConfigController(override_file=tmp_path / "missing.yaml")


def test_invalid_yaml_raises(tmp_path: Path) -> None:
    override = tmp_path / "override.yaml"
    override.write_text("ping: [unclosed", encoding="utf-8")

    with pytest.raises(ConfigError, match="invalid YAML"):
        ConfigController(override_file=override)


def test_non_numeric_value_raises(tmp_path: Path) -> None:
    override = tmp_path / "override.yaml"
    override.write_text("ping:\n  count: many\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="invalid config value"):
        ConfigController(override_file=override).get_settings()
