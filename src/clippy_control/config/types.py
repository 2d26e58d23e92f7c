"""
Shared types for the config module.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Mapping, Optional


class Severity(Enum):
    """Level clippy applies to a lint."""
    WARN = "warn"
    ALLOW = "allow"
    DENY = "deny"
    FORBID = "forbid"

    @property
    def flag_prefix(self) -> str:
        """Single-letter rustc flag for this level (-W, -A, -D, -F)."""
        return _FLAG_PREFIXES[self]

    @classmethod
    def parse(cls, value: str) -> "Severity":
        """
        Convert a config string to a Severity.

        Matching is exact and case-sensitive.

        Raises:
            ValueError: if the string is not one of warn, allow, deny, forbid
        """
        for severity in cls:
            if severity.value == value:
                return severity
        raise ValueError(f"unrecognized value '{value}'")


_FLAG_PREFIXES = {
    Severity.WARN: "W",
    Severity.ALLOW: "A",
    Severity.DENY: "D",
    Severity.FORBID: "F",
}


@dataclass(frozen=True)
class LintConfig:
    """
    Parsed lint settings.

    Iterates lint names in sorted order so the generated command line is
    the same from run to run.
    """
    settings: Mapping[str, Severity] = field(default_factory=dict)
    path: Optional[Path] = None

    # settings is a mappingproxy, which can't be hashed
    __hash__ = None

    def __post_init__(self) -> None:
        ordered = dict(sorted(self.settings.items()))
        object.__setattr__(self, "settings", MappingProxyType(ordered))

    def __len__(self) -> int:
        return len(self.settings)

    def __iter__(self) -> Iterator[str]:
        return iter(self.settings)

    def __getitem__(self, lint: str) -> Severity:
        return self.settings[lint]

    def items(self) -> Iterator[tuple[str, Severity]]:
        return iter(self.settings.items())
