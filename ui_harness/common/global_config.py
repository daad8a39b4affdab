"""
================================================================================
Global Configuration for the UI Harness
================================================================================

This module provides configuration loading and logging setup for the harness.

Features:
    - One immutable HarnessConfig value per process, passed to every component
    - YAML-based configuration loading (config.yaml + {ENV}.yaml)
    - Environment variable overrides (UI_BASE_URL overrides ui.base_url)
    - Centralized Loguru logging configuration

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

import yaml
from loguru import logger


DEFAULT_CONFIG_DIR = Path(__file__).parent.parent.parent / "config"

DEFAULT_LOG_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
)

# Dot paths that may be overridden by environment variables (ui.base_url -> UI_BASE_URL)
ENV_OVERRIDABLE_KEYS = (
    "ui.base_url",
    "ui.default_wait_seconds",
    "ui.poll_interval_seconds",
    "logging.level",
    "logging.file",
)

_config: Optional["HarnessConfig"] = None
_logger_initialized: bool = False


class ConfigurationError(Exception):
    """Raised when configuration loading or access fails."""
    pass


@dataclass(frozen=True)
class HarnessConfig:
    """
    Process-wide harness settings.

    Attributes:
        default_wait_seconds: Default readiness-wait timeout
        poll_interval_seconds: Delay between condition evaluations
        base_url: Application base URL
        log_level: Loguru level name
        log_format: Loguru format string
        log_file: Optional log file path
        expectations: Named expected values (page titles, URLs) for page objects
    """
    default_wait_seconds: int = 10
    poll_interval_seconds: float = 0.25
    base_url: str = "http://localhost:3000"
    log_level: str = "INFO"
    log_format: str = DEFAULT_LOG_FORMAT
    log_file: Optional[str] = None
    expectations: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def expect(self, key: str) -> str:
        """
        Get a named expected value.

        Raises:
            ConfigurationError: Key missing or empty
        """
        value = self.expectations.get(key)
        if value is None or not str(value).strip():
            raise ConfigurationError(f"Expectation not found or empty for key: {key}")
        return str(value).strip()


def _get_defaults() -> Dict[str, Any]:
    """
    Returns default configuration values.
    """
    return {
        "ui": {
            "base_url": "http://localhost:3000",
            "default_wait_seconds": 10,
            "poll_interval_seconds": 0.25,
        },
        "logging": {
            "level": "INFO",
            "format": DEFAULT_LOG_FORMAT,
            "file": None,
        },
        "expectations": {},
    }


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merges two dictionaries, with override taking precedence.
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in configuration file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file {path} must contain a mapping")
    logger.debug(f"Loaded configuration from {path}")
    return data


def _apply_env_overrides(raw: Dict[str, Any], environ: Mapping[str, str]) -> None:
    for key in ENV_OVERRIDABLE_KEYS:
        env_value = environ.get(key.upper().replace(".", "_"))
        if env_value is None:
            continue
        section, name = key.split(".")
        raw.setdefault(section, {})[name] = env_value


def _as_number(raw: Dict[str, Any], key: str, kind: type) -> Any:
    value = raw["ui"].get(key)
    try:
        number = kind(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"ui.{key} must be a {kind.__name__}, got {value!r}") from e
    if number < 0 or (key == "poll_interval_seconds" and number == 0):
        raise ConfigurationError(f"ui.{key} out of range: {number}")
    return number


def load_config(
    config_dir: Optional[Path] = None,
    env: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> HarnessConfig:
    """
    Build a HarnessConfig.

    Configuration loading order (later wins):
        1. Built-in defaults
        2. {config_dir}/config.yaml
        3. {config_dir}/{ENV}.yaml
        4. Environment variables (UI_BASE_URL, UI_DEFAULT_WAIT_SECONDS, ...)

    Args:
        config_dir: Directory holding YAML files (defaults to ./config at repo root)
        env: Environment name; defaults to ENVIRONMENT / ENV, then "dev"
        environ: Environment mapping (defaults to os.environ)

    Raises:
        ConfigurationError: Invalid YAML or invalid numeric setting
    """
    environ = os.environ if environ is None else environ
    config_dir = Path(config_dir) if config_dir else DEFAULT_CONFIG_DIR
    env = env or environ.get("ENVIRONMENT", environ.get("ENV", "dev"))

    raw = _get_defaults()
    if config_dir.exists():
        default_path = config_dir / "config.yaml"
        if default_path.exists():
            raw = _deep_merge(raw, _read_yaml(default_path))
        env_path = config_dir / f"{env}.yaml"
        if env_path.exists():
            raw = _deep_merge(raw, _read_yaml(env_path))
    else:
        logger.warning(f"No configuration directory found at {config_dir}. Using defaults.")

    _apply_env_overrides(raw, environ)

    return HarnessConfig(
        default_wait_seconds=_as_number(raw, "default_wait_seconds", int),
        poll_interval_seconds=_as_number(raw, "poll_interval_seconds", float),
        base_url=str(raw["ui"].get("base_url") or "").rstrip("/"),
        log_level=str(raw["logging"].get("level") or "INFO").upper(),
        log_format=raw["logging"].get("format") or DEFAULT_LOG_FORMAT,
        log_file=raw["logging"].get("file"),
        expectations=MappingProxyType(dict(raw.get("expectations") or {})),
    )


def get_config() -> HarnessConfig:
    """
    Returns the process-wide HarnessConfig, loading it on first use.
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """
    Drop the cached configuration.

    Useful for testing when configuration needs to be reloaded
    with different settings.
    """
    global _config, _logger_initialized
    _config = None
    _logger_initialized = False


def init_logger(config: Optional[HarnessConfig] = None) -> None:
    """
    Initializes the global Loguru logger with consistent configuration.

    Args:
        config: Settings to use; defaults to get_config()
    """
    global _logger_initialized

    if _logger_initialized:
        return

    config = config or get_config()

    logger.remove()
    logger.add(
        sys.stderr,
        level=config.log_level,
        format=config.log_format,
        colorize=True,
        backtrace=True,
        diagnose=True,
    )

    if config.log_file:
        Path(config.log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            config.log_file,
            level=config.log_level,
            format=config.log_format.replace("{level: <8}", "{level}"),
            rotation="10 MB",
            retention="7 days",
            compression="zip",
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {config.log_level}")


__all__ = [
    "ConfigurationError",
    "HarnessConfig",
    "load_config",
    "get_config",
    "reset_config",
    "init_logger",
]
