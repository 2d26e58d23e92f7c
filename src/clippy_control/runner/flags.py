"""
Flag synthesis: (lint, severity) -> rustc lint flag.
"""

from clippy_control.config.types import LintConfig, Severity


LINT_NAMESPACE = "clippy"


def clippy_flag(lint: str, severity: Severity) -> str:
    """Build the flag for one lint, e.g. ``-Dclippy::unwrap_used``."""
    return f"-{severity.flag_prefix}{LINT_NAMESPACE}::{lint}"


def synthesize_flags(config: LintConfig) -> list[str]:
    """One flag per configured lint, in the config's (sorted) order."""
    return [clippy_flag(lint, severity) for lint, severity in config.items()]
