from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import json
import os
from pathlib import Path
from typing import Final, TypeAlias

CONFIG_DIR_NAME: Final[str] = "treeselect"
CONFIG_FILE_NAME: Final[str] = "config.json"
RESET_ENV_VAR: Final[str] = "TREESELECT_RESET"
DEFAULT_USER_AGENT: Final[str] = "Mozilla/5.0 (Windows NT 6.1; Win64; x64)"

JsonValue: TypeAlias = (
    "str | int | float | bool | None | list[JsonValue] | dict[str, JsonValue]"
)


class FetchLimit(Enum):
    TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True, slots=True)
class ParseOptions:
    keep_whitespace: bool = True
    keep_comments: bool = False


@dataclass(frozen=True, slots=True)
class FetchConfig:
    timeout_seconds: float = FetchLimit.TIMEOUT_SECONDS.value
    user_agent: str = DEFAULT_USER_AGENT


@dataclass(frozen=True, slots=True)
class AppConfig:
    fetch: FetchConfig = field(default_factory=FetchConfig)
    parse: ParseOptions = field(default_factory=ParseOptions)


def config_path() -> Path:
    xdg_home = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg_home) if xdg_home else Path.home() / ".config"
    return base / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def load_config(path: Path | None = None) -> AppConfig:
    if os.environ.get(RESET_ENV_VAR, "").strip() == "1":
        return AppConfig()
    resolved = path or config_path()
    if not resolved.exists():
        return AppConfig()
    try:
        raw_data = resolved.read_text(encoding="utf-8")
        payload: JsonValue = json.loads(raw_data)
    except (OSError, json.JSONDecodeError):
        return AppConfig()
    return _parse_config(payload)


def _parse_config(payload: JsonValue) -> AppConfig:
    payload_dict = _get_dict(payload)
    if payload_dict is None:
        return AppConfig()
    fetch_data = _get_dict(payload_dict.get("fetch")) or {}
    parse_data = _get_dict(payload_dict.get("parse")) or {}

    fetch_defaults = FetchConfig()
    parse_defaults = ParseOptions()
    return AppConfig(
        fetch=FetchConfig(
            timeout_seconds=_get_positive_float(
                fetch_data.get("timeout_seconds"), fetch_defaults.timeout_seconds
            ),
            user_agent=_get_str(fetch_data.get("user_agent"), fetch_defaults.user_agent),
        ),
        parse=ParseOptions(
            keep_whitespace=_get_bool(
                parse_data.get("keep_whitespace"), parse_defaults.keep_whitespace
            ),
            keep_comments=_get_bool(
                parse_data.get("keep_comments"), parse_defaults.keep_comments
            ),
        ),
    )


def _get_dict(value: JsonValue | None) -> dict[str, JsonValue] | None:
    if isinstance(value, dict):
        return value
    return None


def _get_str(value: JsonValue | None, default: str) -> str:
    if isinstance(value, str) and value:
        return value
    return default


def _get_bool(value: JsonValue | None, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    return default


def _get_positive_float(value: JsonValue | None, default: float) -> float:
    if isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0:
        return float(value)
    return default
