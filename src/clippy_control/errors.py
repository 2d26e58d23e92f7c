"""
Exception types raised by clippy-control.

Each error also derives from the matching builtin so callers can catch
OSError, ValueError or RuntimeError without importing this module.
"""

from pathlib import Path
from typing import Optional


class ClippyControlError(Exception):
    """Base class for all clippy-control errors."""


class ConfigReadError(ClippyControlError, OSError):
    """The config file could not be read."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"unable to read config file {path}")


class ConfigParseError(ClippyControlError, ValueError):
    """The config file is not a valid TOML document."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"invalid TOML in {source}: {reason}")


class LintSettingError(ClippyControlError, ValueError):
    """A lint was given a value that is not a known severity."""

    def __init__(self, lint: str, value: object, reason: str):
        self.lint = lint
        self.value = value
        self.reason = reason
        super().__init__(f"parsing lint '{lint}': {reason}")


class ClippySpawnError(ClippyControlError, OSError):
    """cargo clippy could not be started."""

    def __init__(self, program: str, reason: str):
        self.program = program
        self.reason = reason
        super().__init__(f"unable to run {program}: {reason}")


class ClippyTerminatedError(ClippyControlError, RuntimeError):
    """cargo clippy exited without an exit code (killed by a signal)."""

    def __init__(self, signal_number: Optional[int] = None):
        self.signal_number = signal_number
        message = "cargo-clippy terminated without exit code"
        if signal_number is not None:
            message += f" (signal {signal_number})"
        super().__init__(message)
