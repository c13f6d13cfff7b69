"""Typed configuration loading and access.

This module provides dataclasses for the sg.toml structure. The file is
optional: every field has a default, so a project without sg.toml renders and
checks the bundled guide.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_bool, get_str, get_str_list, get_table

__all__ = [
    "Config",
    "ConfigError",
    "GuideConfig",
    "RulesConfig",
    "NamingConfig",
    "CheckConfig",
    "CONFIG_FILE_NAME",
    "DEFAULT_OUTPUT_DIR",
    "load_config",
]

CONFIG_FILE_NAME = "sg.toml"
DEFAULT_OUTPUT_DIR = "docs"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None
    hint: str | None = None


@dataclass(frozen=True, slots=True)
class GuideConfig:
    """Where guide data is read from and where Markdown is written.

    `source` is None when the bundled guide (sg/data) is used.
    """

    source: str | None = None
    output: str = DEFAULT_OUTPUT_DIR


@dataclass(frozen=True, slots=True)
class RulesConfig:
    """Per-project rule selection."""

    disabled: tuple[str, ...] = ()
    limits: Mapping[str, int] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class NamingConfig:
    extra_verbs: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class CheckConfig:
    strict: bool = True


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    guide: GuideConfig = field(default_factory=GuideConfig)
    rules: RulesConfig = field(default_factory=RulesConfig)
    naming: NamingConfig = field(default_factory=NamingConfig)
    check: CheckConfig = field(default_factory=CheckConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML).

        Raises:
            ValueError: A known key holds a value of the wrong shape.
        """
        guide = _section(data, "guide")
        rules = _section(data, "rules")
        naming = _section(data, "naming")
        check = _section(data, "check")

        return cls(
            guide=GuideConfig(
                source=get_str(guide, "source"),
                output=get_str(guide, "output") or DEFAULT_OUTPUT_DIR,
            ),
            rules=RulesConfig(
                disabled=_str_tuple(rules, "disabled", "rules.disabled"),
                limits=_limits(rules),
            ),
            naming=NamingConfig(
                extra_verbs=tuple(
                    v.lower() for v in _str_tuple(naming, "extra_verbs", "naming.extra_verbs")
                ),
            ),
            check=CheckConfig(
                strict=_bool(check, "strict", "check.strict", default=True),
            ),
        )


def _section(data: Mapping[str, object], key: str) -> StrDict:
    if key not in data:
        return {}
    table = get_table(data, key)
    if table is None:
        raise ValueError(f"[{key}] must be a table")
    return table


def _str_tuple(table: StrDict, key: str, label: str) -> tuple[str, ...]:
    if key not in table:
        return ()
    values = get_str_list(table, key)
    if values is None:
        raise ValueError(f"{label} must be a list of strings")
    return tuple(v.strip() for v in values if v.strip())


def _bool(table: StrDict, key: str, label: str, *, default: bool) -> bool:
    if key not in table:
        return default
    value = get_bool(table, key)
    if value is None:
        raise ValueError(f"{label} must be true or false")
    return value


def _limits(rules: StrDict) -> dict[str, int]:
    if "limits" not in rules:
        return {}
    raw = get_table(rules, "limits")
    if raw is None:
        raise ValueError("[rules.limits] must be a table")

    limits: dict[str, int] = {}
    for rule_id, value in raw.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"rules.limits.{rule_id} must be an integer")
        if value <= 0:
            raise ValueError(f"rules.limits.{rule_id} must be positive (got {value})")
        limits[rule_id] = value
    return limits


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to sg.toml

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        config = Config.from_dict(result.value)
        return Ok(config)
    except (KeyError, TypeError, ValueError) as e:
        return Err(
            ConfigError(
                f"Invalid config structure: {e}",
                path=path,
                hint=f"Fix {path.name} or remove the offending key",
            )
        )
