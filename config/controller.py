"""Configuration controller for YAML-based probe settings."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from core.models import ProbeSettings

DEFAULT_CONFIG_FILE = Path(__file__).resolve().parent / "default.yaml"


class ConfigError(Exception):
    """Raised when configuration files cannot be read or parsed."""


@dataclass(frozen=True)
class ConfigPaths:
    """Filesystem paths for configuration files."""

    config_file: Path
    override_file: Path | None


class ConfigController:
    """Loads packaged defaults and an optional override file."""

    def __init__(
        self,
        override_file: str | Path | None = None,
        config_file: str | Path = DEFAULT_CONFIG_FILE,
    ) -> None:
        self.paths = ConfigPaths(
            config_file=Path(config_file),
            override_file=Path(override_file).expanduser() if override_file else None,
        )
        self.config: dict[str, Any] = {}
        self.load_config()

    def load_config(self) -> None:
        """Load configuration from the default and override YAML files."""

        config = self._read_yaml(self.paths.config_file)

        if self.paths.override_file is not None:
            if not self.paths.override_file.exists():
                raise ConfigError(f"config file not found: {self.paths.override_file}")
            override_config = self._read_yaml(self.paths.override_file)
            if override_config:
                config = self._deep_merge(config, override_config)

        self.config = config

    def get_config(self) -> dict[str, Any]:
        """Return the currently loaded configuration."""

        return dict(self.config)

    def get_settings(self) -> ProbeSettings:
        """Return the loaded configuration as typed probe settings."""

        return self._normalize(self.config)

    def _read_yaml(self, path: Path) -> dict[str, Any]:
        try:
            with path.open("r", encoding="utf-8") as file:
                data = yaml.safe_load(file) or {}
        except OSError as exc:
            raise ConfigError(f"cannot read config {path}: {exc}") from exc
        except yaml.YAMLError as exc:
            raise ConfigError(f"invalid YAML in {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"config {path} must contain a mapping")
        return data

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge dictionaries, overriding base values with override values."""

        merged = dict(base)
        for key, value in override.items():
            if (
                key in merged
                and isinstance(merged[key], dict)
                and isinstance(value, dict)
            ):
                merged[key] = self._deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged

    def _normalize(self, config: dict[str, Any]) -> ProbeSettings:
        """Coerce raw YAML values into probe settings."""

        defaults = ProbeSettings()
        ping_cfg = dict(config.get("ping") or {})
        snmp_cfg = dict(config.get("snmp") or {})

        tool_paths = snmp_cfg.get("tool_paths") or []
        if isinstance(tool_paths, str):
            tool_paths = [tool_paths]

        try:
            return ProbeSettings(
                check_name=str(config.get("check_name") or defaults.check_name),
                logging_level=str(config.get("logging_level") or defaults.logging_level),
                ping_count=int(ping_cfg.get("count", defaults.ping_count)),
                ping_timeout_s=int(ping_cfg.get("timeout_s", defaults.ping_timeout_s)),
                tool_paths=tuple(str(path) for path in tool_paths),
                snmp_version=str(snmp_cfg.get("version", defaults.snmp_version)),
                snmp_retries=int(snmp_cfg.get("retries", defaults.snmp_retries)),
                snmp_timeout_s=int(snmp_cfg.get("timeout_s", defaults.snmp_timeout_s)),
            )
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"invalid config value: {exc}") from exc
