"""Configuration management for Ticklist."""

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli_w

from .lineedit import DEFAULT_CHAR_LIMIT
from .render import DEFAULT_INPUT_WIDTH, DEFAULT_PLACEHOLDER
from .styles import DEFAULT_STYLE, THEMES

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when a configuration value is out of range."""


@dataclass
class InputConfig:
    """Settings for the new-task input field."""

    char_limit: int = DEFAULT_CHAR_LIMIT   # Max characters per task
    width: int = DEFAULT_INPUT_WIDTH       # Visible columns before scrolling
    placeholder: str = DEFAULT_PLACEHOLDER


@dataclass
class Config:
    """Ticklist configuration."""

    input: InputConfig = field(default_factory=InputConfig)
    style: str = field(default=DEFAULT_STYLE)
    debug_logging: bool = field(default=False)  # Debug log file (opt-in)


# Config file path
CONFIG_DIR = Path.home() / ".ticklist"
CONFIG_FILE = CONFIG_DIR / "config.toml"
LOG_FILE = Path.home() / ".cache" / "ticklist" / "debug.log"


def _env_bool(value: str) -> bool:
    return value.lower() in ("true", "1", "yes")


def validate_config(config: Config) -> None:
    """Check value ranges.

    Raises:
        ConfigError: If any value is unusable
    """
    if config.input.char_limit < 1:
        raise ConfigError(f"char_limit must be at least 1, got {config.input.char_limit}")
    if config.input.width < 1:
        raise ConfigError(f"input width must be at least 1, got {config.input.width}")
    if config.style not in THEMES:
        raise ConfigError(f"unknown style {config.style!r} (choose from {', '.join(THEMES)})")


def _read_config_file() -> dict[str, Any] | None:
    if not CONFIG_FILE.exists():
        return None
    try:
        with open(CONFIG_FILE, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        logger.warning(f"Ignoring unreadable config file {CONFIG_FILE}: {exc}")
        return None


def _int_setting(raw: Any, default: int, name: str) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring invalid {name}={raw!r}, using {default}")
        return default


def _bool_setting(raw: Any, name: str) -> bool:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        return _env_bool(raw)
    logger.warning(f"Ignoring invalid {name}={raw!r}, using False")
    return False


def load_config() -> Config:
    """Load configuration from environment, file, or defaults.

    Priority (highest to lowest):
    1. Environment variables (TICKLIST_*)
    2. Config file (~/.ticklist/config.toml)
    3. Hardcoded defaults

    Out-of-range values are logged and replaced with defaults so the
    editor always starts.
    """
    defaults = InputConfig()
    char_limit = defaults.char_limit
    width = defaults.width
    placeholder = defaults.placeholder
    style = DEFAULT_STYLE
    debug_logging = False

    data = _read_config_file()
    if data is not None:
        input_data = data.get("input", {})
        if not isinstance(input_data, dict):
            logger.warning(f"Ignoring [input] setting {input_data!r}, expected a table")
            input_data = {}
        char_limit = _int_setting(input_data.get("char_limit", char_limit), defaults.char_limit, "char_limit")
        width = _int_setting(input_data.get("width", width), defaults.width, "width")
        placeholder = str(input_data.get("placeholder", placeholder))
        style = data.get("style", style)
        if not isinstance(style, str):
            logger.warning(f"Ignoring style={style!r}, expected a string")
            style = DEFAULT_STYLE
        debug_logging = _bool_setting(data.get("debug_logging", debug_logging), "debug_logging")

    # Environment variables override everything
    char_limit_env = os.getenv("TICKLIST_CHAR_LIMIT")
    if char_limit_env is not None:
        char_limit = _int_setting(char_limit_env, char_limit, "TICKLIST_CHAR_LIMIT")
    width_env = os.getenv("TICKLIST_INPUT_WIDTH")
    if width_env is not None:
        width = _int_setting(width_env, width, "TICKLIST_INPUT_WIDTH")
    placeholder = os.getenv("TICKLIST_PLACEHOLDER", placeholder)
    style = os.getenv("TICKLIST_STYLE", style)
    debug_logging_env = os.getenv("TICKLIST_DEBUG_LOGGING")
    if debug_logging_env is not None:
        debug_logging = _env_bool(debug_logging_env)

    if char_limit < 1:
        logger.warning(f"char_limit {char_limit} out of range, using {defaults.char_limit}")
        char_limit = defaults.char_limit
    if width < 1:
        logger.warning(f"input width {width} out of range, using {defaults.width}")
        width = defaults.width
    if style not in THEMES:
        logger.warning(f"Unknown style {style!r}, using {DEFAULT_STYLE}")
        style = DEFAULT_STYLE

    return Config(
        input=InputConfig(char_limit=char_limit, width=width, placeholder=placeholder),
        style=style,
        debug_logging=debug_logging,
    )


def save_config(config: Config) -> None:
    """Save configuration to file.

    Raises:
        ConfigError: If the configuration is invalid
    """
    validate_config(config)
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)

    data: dict[str, Any] = {
        "style": config.style,
        "debug_logging": config.debug_logging,
    }

    # Save input config only if non-default
    if config.input != InputConfig():
        data["input"] = {
            "char_limit": config.input.char_limit,
            "width": config.input.width,
            "placeholder": config.input.placeholder,
        }

    with open(CONFIG_FILE, "wb") as f:
        tomli_w.dump(data, f)
    logger.info(f"Saved config to {CONFIG_FILE}")
