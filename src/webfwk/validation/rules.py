"""Rule capability contract and the built-in rules."""

from __future__ import annotations

import math
import re
from typing import Protocol, runtime_checkable


@runtime_checkable
class Rule(Protocol):
    """Anything with a single-argument ``validate`` returning acceptance."""

    def validate(self, value: object) -> bool: ...


def is_scalar(value: object) -> bool:
    return isinstance(value, (str, int, float, bool))


def _float_text(value: float) -> str:
    """14 significant digits; exponent form as "1.0E+20", non-finite as "INF"/"NAN"."""
    if math.isnan(value):
        return "NAN"
    if math.isinf(value):
        return "INF" if value > 0 else "-INF"
    text = f"{value:.14G}"
    if "E" not in text:
        return text
    mantissa, exponent = text.split("E")
    if "." not in mantissa:
        mantissa += ".0"
    return f"{mantissa}E{exponent[0]}{exponent[1:].lstrip('0')}"


def to_text(value: object) -> str:
    """Text form of a scalar: booleans as "1"/"", floats without a trailing ".0"."""
    if isinstance(value, bool):
        return "1" if value else ""
    if isinstance(value, float):
        return _float_text(value)
    return str(value)


class Length:
    """Requires a value to have a minimum and/or a maximum length."""

    def __init__(self, minimum: int = 0, maximum: int | None = None) -> None:
        self.minimum = minimum
        self.maximum = maximum

    def validate(self, value: object) -> bool:
        if not is_scalar(value):
            return False
        length = len(to_text(value))
        if length < self.minimum:
            return False
        return self.maximum is None or length <= self.maximum

    def __repr__(self) -> str:
        return f"Length(minimum={self.minimum!r}, maximum={self.maximum!r})"


class Regex:
    """Requires a value to match a pattern (search semantics)."""

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        self._compiled = re.compile(pattern)

    def validate(self, value: object) -> bool:
        if not is_scalar(value):
            return False
        return self._compiled.search(to_text(value)) is not None

    def __repr__(self) -> str:
        return f"Regex({self.pattern!r})"


class Contains:
    """Requires a value to contain at least one of the given needles."""

    def __init__(self, *needles: str) -> None:
        self.needles = list(needles)

    def validate(self, value: object) -> bool:
        if not is_scalar(value):
            return False
        text = to_text(value)
        return any(needle in text for needle in self.needles)

    def __repr__(self) -> str:
        args = ", ".join(repr(n) for n in self.needles)
        return f"Contains({args})"
