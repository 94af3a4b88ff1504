"""Typed access to the flattened game specification."""

from __future__ import annotations

import random
import re
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from .xmlspec import parse_xml_file

DEFAULT_SPEC = "xmlSpec/game.xml"

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_INT_RE = re.compile(r"\s*([+-]?\d+)")
_FLOAT_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class GamedataError(LookupError):
    """Raised when a requested tag is missing from the specification."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class Gamedata:
    """Read-only game settings keyed by tag path such as ``world/width``."""

    def __init__(
        self, data: Mapping[str, str], rng: random.Random | None = None
    ) -> None:
        self.data = MappingProxyType(dict(sorted(data.items())))
        self._rng = rng if rng is not None else random.Random()

    @classmethod
    def from_file(cls, path: str | Path = DEFAULT_SPEC) -> Gamedata:
        """Load settings from a specification XML file."""
        return cls(parse_xml_file(path))

    def _lookup(self, tag: str, kind: str) -> str:
        try:
            return self.data[tag]
        except KeyError:
            raise GamedataError(
                f"Game: Didn't find {kind} tag {tag} in xml"
            ) from None

    def get_bool(self, tag: str) -> bool:
        """True only when the value is exactly ``true``."""
        return self._lookup(tag, "boolean") == "true"

    def get_str(self, tag: str) -> str:
        return self._lookup(tag, "string")

    def get_int(self, tag: str) -> int:
        """Leading integer of the value; 0 if there is none."""
        match = _INT_RE.match(self._lookup(tag, "integer"))
        if match is None:
            return 0
        return max(_INT_MIN, min(_INT_MAX, int(match.group(1))))

    def get_float(self, tag: str) -> float:
        """Leading decimal number of the value; 0.0 if there is none."""
        match = _FLOAT_RE.match(self._lookup(tag, "float"))
        if match is None:
            return 0.0
        return float(match.group(1))

    def rand_in_range(self, low: int, high: int) -> float:
        """A random float in [low, high)."""
        return low + self._rng.random() * (high - low)

    def rand_float(self, low: float, high: float) -> float:
        """A random float in [low, high)."""
        return low + self._rng.random() * (high - low)

    def has_tag(self, tag: str) -> bool:
        return tag in self.data

    def display(self) -> None:
        """Print every setting as ``tag, value``."""
        for tag, value in self.data.items():
            print(f"{tag}, {value}")