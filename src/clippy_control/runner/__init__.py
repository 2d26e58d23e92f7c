"""
Runs cargo clippy with the configured lint levels.
"""

from clippy_control.runner.flags import LINT_NAMESPACE, clippy_flag, synthesize_flags
from clippy_control.runner.invoker import (
    CARGO,
    CLIPPY_SUBCOMMAND,
    build_command,
    run_clippy,
)

__all__ = [
    # Flags
    "LINT_NAMESPACE",
    "clippy_flag",
    "synthesize_flags",
    # Invoker
    "CARGO",
    "CLIPPY_SUBCOMMAND",
    "build_command",
    "run_clippy",
]
