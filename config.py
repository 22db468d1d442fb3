from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from pathlib import Path
from typing import Any
from typing import Iterable

import yaml


LOG_LEVELS = ("critical", "error", "warning", "info", "debug", "trace")


class ConfigError(ValueError):
    pass


def is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def check_keys(keys: Iterable[Any]) -> None:
    known_keys = {field.name for field in dataclasses.fields(ServerConfig)}
    unknown_keys = sorted(str(key) for key in keys if key not in known_keys)
    if unknown_keys:
        raise ConfigError(f"unknown config key(s): {', '.join(unknown_keys)}")


@dataclass(frozen=True)
class ServerConfig:
    host: str = "127.0.0.1"
    port: int = 8080
    log_level: str = "info"

    def __post_init__(self) -> None:
        if not isinstance(self.host, str) or not self.host:
            raise ConfigError(f"host: expected a non-empty string, got {self.host!r}")

        if not is_integer(self.port):
            raise ConfigError(f"port: expected an integer, got {self.port!r}")
        if not 1 <= self.port <= 65535:
            raise ConfigError(f"port: {self.port} is outside 1-65535")

        if self.log_level not in LOG_LEVELS:
            rendered_levels = ", ".join(LOG_LEVELS)
            raise ConfigError(
                f"log_level: expected one of {rendered_levels}, got {self.log_level!r}"
            )

    def override(self, **values: Any) -> ServerConfig:
        changes = {key: value for key, value in values.items() if value is not None}
        check_keys(changes)
        return dataclasses.replace(self, **changes)

    @staticmethod
    def from_dict(raw_config: dict[str, Any]) -> ServerConfig:
        check_keys(raw_config)
        return ServerConfig(**raw_config)

    @staticmethod
    def load(path: Path) -> ServerConfig:
        with path.open(encoding="utf-8") as f:
            try:
                raw_config = yaml.safe_load(f.read())
            except UnicodeDecodeError as e:
                raise ConfigError(f"{path}: not valid UTF-8") from e
            except yaml.YAMLError as e:
                raise ConfigError(f"{path}: invalid YAML") from e

        if raw_config is None:
            return ServerConfig()
        if not isinstance(raw_config, dict):
            raise ConfigError(f"{path}: expected a mapping at the top level")
        return ServerConfig.from_dict(raw_config)
