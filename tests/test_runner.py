"""Tests for flag synthesis and the cargo clippy invoker."""

import subprocess
import sys

import pytest

from clippy_control.config import Severity, parse_config
from clippy_control.config.types import LintConfig
from clippy_control.errors import ClippySpawnError, ClippyTerminatedError
from clippy_control.runner import build_command, clippy_flag, run_clippy, synthesize_flags


class TestFlagSynthesis:
    """Tests for clippy_flag and synthesize_flags."""

    @pytest.mark.parametrize(
        "value, prefix",
        [("warn", "W"), ("allow", "A"), ("deny", "D"), ("forbid", "F")],
    )
    def test_severity_to_prefix(self, value, prefix):
        """Each severity string produces its flag prefix."""
        config = parse_config(f'some_lint = "{value}"\n')
        assert synthesize_flags(config) == [f"-{prefix}clippy::some_lint"]

    def test_deny_example(self):
        """deny produces -D."""
        assert synthesize_flags(parse_config('foo = "deny"\n')) == ["-Dclippy::foo"]

    def test_allow_example(self):
        """allow produces -A."""
        assert synthesize_flags(parse_config('bar = "allow"\n')) == ["-Aclippy::bar"]

    def test_one_flag_per_entry(self):
        """N lints produce N flags."""
        settings = {f"lint_{i}": list(Severity)[i % 4] for i in range(25)}
        config = LintConfig(settings=settings)

        assert len(synthesize_flags(config)) == 25

    def test_empty_config(self):
        """No lints, no flags."""
        assert synthesize_flags(LintConfig()) == []

    def test_lint_name_verbatim(self):
        """Lint names are not escaped."""
        assert clippy_flag("needless-lifetimes", Severity.WARN) == "-Wclippy::needless-lifetimes"

    def test_sorted_output(self):
        """Flags come out sorted by lint name."""
        config = parse_config('b = "warn"\na = "deny"\n')
        assert synthesize_flags(config) == ["-Dclippy::a", "-Wclippy::b"]


class TestBuildCommand:
    """Tests for build_command."""

    def test_basic_command(self):
        """Command is cargo clippy -- <flags>."""
        config = parse_config('foo = "deny"\nbar = "allow"\n')

        assert build_command(config) == [
            "cargo", "clippy", "--", "-Aclippy::bar", "-Dclippy::foo",
        ]

    def test_fix_before_severity_flags(self):
        """--fix comes before every lint flag."""
        config = parse_config('foo = "deny"\n')
        cmd = build_command(config, fix=True)

        assert cmd == ["cargo", "clippy", "--fix", "--", "-Dclippy::foo"]
        assert cmd.index("--fix") < cmd.index("-Dclippy::foo")

    def test_empty_config_still_has_separator(self):
        """The separator is always present."""
        assert build_command(LintConfig()) == ["cargo", "clippy", "--"]


class TestRunClippy:
    """Tests for run_clippy."""

    def test_returns_exit_code(self):
        """Non-zero exit code is returned as is."""
        code = run_clippy([sys.executable, "-c", "import sys; sys.exit(3)"])
        assert code == 3

    def test_returns_zero(self):
        """Success returns 0."""
        assert run_clippy([sys.executable, "-c", "pass"]) == 0

    def test_passes_arguments_through(self, monkeypatch):
        """The command is run unchanged."""
        calls = []

        def fake_run(cmd, check):
            calls.append(cmd)
            return subprocess.CompletedProcess(cmd, 101)

        monkeypatch.setattr(subprocess, "run", fake_run)
        cmd = ["cargo", "clippy", "--", "-Dclippy::foo"]

        assert run_clippy(cmd) == 101
        assert calls == [cmd]

    def test_signal_termination_raises(self, monkeypatch):
        """Negative return code means killed by a signal."""
        monkeypatch.setattr(
            subprocess, "run", lambda cmd, check: subprocess.CompletedProcess(cmd, -9)
        )

        with pytest.raises(ClippyTerminatedError) as exc_info:
            run_clippy(["cargo", "clippy", "--"])

        assert exc_info.value.signal_number == 9
        assert "without exit code" in str(exc_info.value)
        assert isinstance(exc_info.value, RuntimeError)

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX signals")
    def test_real_signal_termination(self):
        """A child killed with SIGKILL has no exit code."""
        script = "import os, signal; os.kill(os.getpid(), signal.SIGKILL)"

        with pytest.raises(ClippyTerminatedError):
            run_clippy([sys.executable, "-c", script])

    def test_missing_program_raises_spawn_error(self):
        """An unknown program raises ClippySpawnError."""
        with pytest.raises(ClippySpawnError) as exc_info:
            run_clippy(["clippy-control-no-such-program", "clippy"])

        assert "clippy-control-no-such-program" in str(exc_info.value)
        assert isinstance(exc_info.value, OSError)
