"""
cargo clippy invocation.

Builds the command line and runs it as a child process that shares our
stdin, stdout and stderr.
"""

import logging
import subprocess

from clippy_control.config.types import LintConfig
from clippy_control.errors import ClippySpawnError, ClippyTerminatedError
from clippy_control.runner.flags import synthesize_flags


CARGO = "cargo"
CLIPPY_SUBCOMMAND = "clippy"

logger = logging.getLogger(__name__)


def build_command(config: LintConfig, fix: bool = False) -> list[str]:
    """
    Build the cargo clippy command.

    Args:
        config: Lint settings to pass through
        fix: Forward clippy's --fix mode

    Returns:
        Argument list: cargo clippy [--fix] -- <lint flags>
    """
    cmd = [CARGO, CLIPPY_SUBCOMMAND]
    if fix:
        cmd.append("--fix")

    # Everything after the separator goes to clippy-driver, not cargo
    cmd.append("--")
    cmd.extend(synthesize_flags(config))

    return cmd


def run_clippy(cmd: list[str]) -> int:
    """
    Run the command and wait for it to finish.

    Returns:
        The child's exit code

    Raises:
        ClippySpawnError: the program could not be started
        ClippyTerminatedError: the child was killed by a signal
    """
    logger.debug("Running: %s", " ".join(cmd))

    try:
        process = subprocess.run(cmd, check=False)
    except OSError as e:
        raise ClippySpawnError(cmd[0], e.strerror or str(e)) from e

    # Negative return codes are how subprocess reports death by signal
    if process.returncode < 0:
        raise ClippyTerminatedError(-process.returncode)

    logger.debug("%s exited with code %d", cmd[0], process.returncode)
    return process.returncode
