"""File sizes shown in binary units."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass


class Unit(enum.Enum):
    NONE = "none"
    BYTE = "byte"
    KILO = "kilo"
    MEGA = "mega"
    GIGA = "giga"
    TERA = "tera"


class SizeFlag(enum.Enum):
    """How sizes are written: with long units, short units, or in bytes."""

    DEFAULT = "default"
    SHORT = "short"
    BYTES = "bytes"


_KIB = 1024

_DIVISORS = {
    Unit.KILO: _KIB,
    Unit.MEGA: _KIB**2,
    Unit.GIGA: _KIB**3,
    Unit.TERA: _KIB**4,
}

_LONG_UNITS = {
    Unit.NONE: "-",
    Unit.BYTE: "B",
    Unit.KILO: "KB",
    Unit.MEGA: "MB",
    Unit.GIGA: "GB",
    Unit.TERA: "TB",
}

_SHORT_UNITS = {
    Unit.NONE: "-",
    Unit.BYTE: "B",
    Unit.KILO: "K",
    Unit.MEGA: "M",
    Unit.GIGA: "G",
    Unit.TERA: "T",
}


def _round_half_away(number: float) -> float:
    floor = math.floor(number)
    return floor + 1 if number - floor >= 0.5 else floor


def _format_size(number: float) -> str:
    precision = 1 if number < 10.0 else 0
    return f"{number:.{precision}f}"


@dataclass(frozen=True, order=True)
class Size:
    """A size in bytes."""

    bytes: int

    def unit(self, flag: SizeFlag = SizeFlag.DEFAULT) -> Unit:
        """The largest unit the size reaches, or bytes when asked for them."""
        if self.bytes < _KIB or flag is SizeFlag.BYTES:
            return Unit.BYTE
        if self.bytes < _KIB**2:
            return Unit.KILO
        if self.bytes < _KIB**3:
            return Unit.MEGA
        if self.bytes < _KIB**4:
            return Unit.GIGA
        return Unit.TERA

    def value_string(self, flag: SizeFlag = SizeFlag.DEFAULT) -> str:
        """The number part, with one decimal below ten and none above."""
        unit = self.unit(flag)
        if unit is Unit.NONE:
            return ""
        if unit is Unit.BYTE:
            return str(self.bytes)
        number = _round_half_away(self.bytes / _DIVISORS[unit] * 10.0) / 10.0
        return _format_size(number)

    def unit_string(self, flag: SizeFlag = SizeFlag.DEFAULT) -> str:
        """The unit part for the chosen style."""
        unit = self.unit(flag)
        if flag is SizeFlag.DEFAULT:
            return _LONG_UNITS[unit]
        if flag is SizeFlag.SHORT:
            return _SHORT_UNITS[unit]
        return ""

    def render(self, flag: SizeFlag = SizeFlag.DEFAULT, val_alignment: int = 0) -> str:
        """Value right-aligned to ``val_alignment`` characters, then the unit."""
        value = self.value_string(flag)
        if len(value) > val_alignment:
            raise ValueError(
                f"value {value!r} is wider than the alignment {val_alignment}"
            )
        padding = " " * (val_alignment - len(value))
        separator = "" if flag is SizeFlag.SHORT else " "
        return f"{padding}{value}{separator}{self.unit_string(flag)}"