"""
clippy-control: drive cargo clippy from a lint-configuration file.

Reads clippy-control.toml, turns each lint setting into a clippy flag and
runs cargo clippy with them.
"""

__version__ = "0.1.0"

from clippy_control.config import LintConfig, Severity, load_config
from clippy_control.runner import build_command, run_clippy, synthesize_flags

__all__ = [
    "LintConfig",
    "Severity",
    "load_config",
    "synthesize_flags",
    "build_command",
    "run_clippy",
]
