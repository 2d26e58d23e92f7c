"""
Lint configuration for clippy-control.

Loads clippy-control.toml into an immutable lint -> severity mapping.
"""

from clippy_control.config.types import LintConfig, Severity
from clippy_control.config.loader import DEFAULT_CONFIG_PATH, load_config, parse_config

__all__ = [
    "LintConfig",
    "Severity",
    "DEFAULT_CONFIG_PATH",
    "load_config",
    "parse_config",
]
