"""Capability types for vertices and weights."""

import math
from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Protocol, Self


class Weight(Protocol):
    """A totally ordered value that can be summed along a path."""

    def __lt__(self, other: Any, /) -> bool: ...

    def __add__(self, other: Any, /) -> Self: ...


@dataclass(frozen=True, slots=True)
class WeightSystem[W: Weight]:
    """Arithmetic and text conversions for one weight type.

    Attributes:
        name: Short name used in configuration (e.g. ``"float"``).
        zero: Distance of the source from itself.
        infinity: Sentinel larger than any finite path weight.
        parse: Converts a weight token to a value. Raises ``ValueError`` on bad input.
        format: Converts a value back to its token.

    """

    name: str
    zero: W
    infinity: W
    parse: Callable[[str], W]
    format: Callable[[W], str] = str

    def is_infinite(self, value: W) -> bool:
        """Check whether a distance is the infinity sentinel."""
        return value == self.infinity


def _parse_decimal(text: str) -> Decimal:
    try:
        return Decimal(text)
    except InvalidOperation as e:
        msg = f"Invalid decimal weight: {text!r}"
        raise ValueError(msg) from e


FLOAT_WEIGHTS: WeightSystem[float] = WeightSystem(name="float", zero=0.0, infinity=math.inf, parse=float)
# Integers have no infinity of their own; int and float compare and add freely.
INT_WEIGHTS: WeightSystem[int | float] = WeightSystem(name="int", zero=0, infinity=math.inf, parse=int)
DECIMAL_WEIGHTS: WeightSystem[Decimal] = WeightSystem(
    name="decimal",
    zero=Decimal(0),
    infinity=Decimal("Infinity"),
    parse=_parse_decimal,
)

_WEIGHT_SYSTEMS: dict[str, WeightSystem[Any]] = {
    system.name: system for system in (FLOAT_WEIGHTS, INT_WEIGHTS, DECIMAL_WEIGHTS)
}


def weight_system(name: str) -> WeightSystem[Any]:
    """Look up a built-in weight system by name.

    Raises:
        ValueError: If no weight system has that name.

    """
    try:
        return _WEIGHT_SYSTEMS[name]
    except KeyError:
        msg = f"Unknown weight type '{name}'. Expected one of: {', '.join(_WEIGHT_SYSTEMS)}"
        raise ValueError(msg) from None


def weight_system_for(value: object) -> WeightSystem[Any]:
    """Pick the built-in weight system that can add up values like this one.

    Raises:
        TypeError: If no built-in weight system handles the value's type.

    """
    if isinstance(value, Decimal):
        return DECIMAL_WEIGHTS
    if isinstance(value, int):
        return INT_WEIGHTS
    if isinstance(value, float):
        return FLOAT_WEIGHTS
    msg = f"No built-in weight system for {type(value).__name__} weights; pass one explicitly"
    raise TypeError(msg)


def parse_str_vertex(text: str) -> str:
    """Parse a vertex token as a non-empty string."""
    token = text.strip()
    if not token:
        msg = "Vertex name cannot be empty"
        raise ValueError(msg)
    return token


def parse_int_vertex(text: str) -> int:
    return int(text.strip())


_VERTEX_PARSERS: dict[str, Callable[[str], Any]] = {
    "str": parse_str_vertex,
    "int": parse_int_vertex,
}


def vertex_parser(name: str) -> Callable[[str], Any]:
    """Look up a built-in vertex parser by name.

    Raises:
        ValueError: If no vertex parser has that name.

    """
    try:
        return _VERTEX_PARSERS[name]
    except KeyError:
        msg = f"Unknown vertex type '{name}'. Expected one of: {', '.join(_VERTEX_PARSERS)}"
        raise ValueError(msg) from None


WEIGHT_TYPE_NAMES = tuple(_WEIGHT_SYSTEMS)
VERTEX_TYPE_NAMES = tuple(_VERTEX_PARSERS)
