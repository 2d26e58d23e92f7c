"""
Config file loading.

Reads clippy-control.toml and validates every lint setting.
"""

import logging
from pathlib import Path
from typing import Any, Optional

import tomli

from clippy_control.config.types import LintConfig, Severity
from clippy_control.errors import ConfigParseError, ConfigReadError, LintSettingError


DEFAULT_CONFIG_PATH = Path("clippy-control.toml")

logger = logging.getLogger(__name__)


def load_config(path: Path) -> LintConfig:
    """
    Load a lint config from disk.

    Args:
        path: Path to clippy-control.toml

    Returns:
        LintConfig with one entry per top-level key

    Raises:
        ConfigReadError: file is missing or unreadable
        ConfigParseError: file is not valid TOML
        LintSettingError: a value is not a known severity string
    """
    path = Path(path)
    logger.debug("Reading config file %s", path)

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigReadError(path) from e

    return parse_config(text, source=path)


def parse_config(text: str, source: Optional[Path] = None) -> LintConfig:
    """
    Parse config text into a LintConfig.

    Either every lint is valid or an error is raised; a partial config is
    never returned.
    """
    try:
        document = tomli.loads(text)
    except tomli.TOMLDecodeError as e:
        raise ConfigParseError(str(source or "<string>"), str(e)) from e

    settings = {
        lint: _parse_setting(lint, value)
        for lint, value in document.items()
    }
    logger.debug("Parsed %d lint setting(s) from %s", len(settings), source or "<string>")

    return LintConfig(settings=settings, path=source)


def _parse_setting(lint: str, value: Any) -> Severity:
    """Validate a single lint value."""
    if not isinstance(value, str):
        raise LintSettingError(lint, value, f"value {value!r} not a string")

    try:
        return Severity.parse(value)
    except ValueError as e:
        raise LintSettingError(lint, value, str(e)) from e
