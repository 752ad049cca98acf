"""Named float variables that commands can refer to as ``$name``."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

FLT_MAX = 3.4028234663852886e38

_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:inf(?:inity)?|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)",
    re.IGNORECASE,
)


def _parse_float(text: str) -> float:
    """Parse the leading float of ``text``, ignoring anything after it."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    value = float(match.group(0))
    if value != value or abs(value) == float("inf"):
        return value
    if abs(value) > FLT_MAX:
        raise OverflowError(f"number out of range: {text!r}")
    return value


@dataclass
class FloatVar:
    """A tweakable float with its drag speed and allowed range."""

    name: str
    value: float
    speed: float = 0.01
    min_value: float = -FLT_MAX
    max_value: float = FLT_MAX


class VariableCache:
    """An ordered collection of float variables, looked up by name."""

    def __init__(self) -> None:
        self._vars: list[FloatVar] = []

    def __iter__(self) -> Iterator[FloatVar]:
        return iter(self._vars)

    def __len__(self) -> int:
        return len(self._vars)

    def _find(self, name: str) -> FloatVar | None:
        return next((var for var in self._vars if var.name == name), None)

    def clear(self) -> None:
        """Forget every variable."""
        self._vars.clear()

    def is_var_name(self, name: str) -> bool:
        """Whether ``name`` refers to a variable, i.e. starts with ``$``."""
        return name.startswith("$")

    def add_float(
        self,
        name: str,
        value: float,
        speed: float = 0.01,
        min_value: float = -FLT_MAX,
        max_value: float = FLT_MAX,
    ) -> None:
        """Add a variable unless one of that name already exists."""
        if self._find(name) is None:
            self._vars.append(FloatVar(name, value, speed, min_value, max_value))

    def get_float(self, param: str) -> float:
        """The value of variable ``param``, or ``param`` parsed as a number.

        Raises ValueError if ``param`` is neither a known variable nor
        begins with a number.
        """
        if self.is_var_name(param):
            var = self._find(param)
            if var is not None:
                return var.value
        return _parse_float(param)

    def set_float(self, name: str, value: float) -> None:
        """Change an existing variable's value, clamped to its range."""
        var = self._find(name)
        if var is None:
            raise KeyError(name)
        if var.min_value < var.max_value:
            value = min(max(value, var.min_value), var.max_value)
        var.value = value