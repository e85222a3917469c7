"""Tests for weight systems and vertex parsers."""

import math
from decimal import Decimal
from typing import Any

import pytest

from wgraph import (
    DECIMAL_WEIGHTS,
    FLOAT_WEIGHTS,
    INT_WEIGHTS,
    WeightSystem,
    vertex_parser,
    weight_system,
    weight_system_for,
)


class TestWeightSystem:
    @pytest.mark.parametrize("system", [FLOAT_WEIGHTS, INT_WEIGHTS, DECIMAL_WEIGHTS])
    def test_infinity_exceeds_large_sums(self, system: WeightSystem[Any]) -> None:
        large = system.parse("1000000")
        assert large + large < system.infinity
        assert system.zero < system.infinity

    @pytest.mark.parametrize("system", [FLOAT_WEIGHTS, INT_WEIGHTS, DECIMAL_WEIGHTS])
    def test_is_infinite(self, system: WeightSystem[Any]) -> None:
        assert system.is_infinite(system.infinity)
        assert not system.is_infinite(system.zero)

    def test_float_parse(self) -> None:
        assert FLOAT_WEIGHTS.parse("2.5") == 2.5
        assert FLOAT_WEIGHTS.infinity == math.inf

    def test_int_values_stay_int(self) -> None:
        assert isinstance(INT_WEIGHTS.zero, int)
        assert isinstance(INT_WEIGHTS.parse("3"), int)
        assert INT_WEIGHTS.infinity == math.inf

    def test_int_parse_rejects_fractions(self) -> None:
        with pytest.raises(ValueError):
            INT_WEIGHTS.parse("2.5")

    def test_decimal_parse(self) -> None:
        assert DECIMAL_WEIGHTS.parse("0.1") == Decimal("0.1")

    def test_decimal_parse_rejects_garbage(self) -> None:
        with pytest.raises(ValueError, match="Invalid decimal weight"):
            DECIMAL_WEIGHTS.parse("abc")

    def test_lookup_by_name(self) -> None:
        assert weight_system("float") is FLOAT_WEIGHTS
        assert weight_system("int") is INT_WEIGHTS
        assert weight_system("decimal") is DECIMAL_WEIGHTS

    def test_unknown_name(self) -> None:
        with pytest.raises(ValueError, match="Unknown weight type"):
            weight_system("complex")

    def test_system_for_value_type(self) -> None:
        assert weight_system_for(1.5) is FLOAT_WEIGHTS
        assert weight_system_for(3) is INT_WEIGHTS
        assert weight_system_for(Decimal("0.1")) is DECIMAL_WEIGHTS

    def test_system_for_unsupported_type(self) -> None:
        with pytest.raises(TypeError, match="No built-in weight system for str"):
            weight_system_for("heavy")


class TestVertexParser:
    def test_str_parser_strips(self) -> None:
        assert vertex_parser("str")("  A ") == "A"

    def test_str_parser_rejects_empty(self) -> None:
        with pytest.raises(ValueError, match="empty"):
            vertex_parser("str")("   ")

    def test_int_parser(self) -> None:
        assert vertex_parser("int")(" 42 ") == 42

    def test_int_parser_rejects_text(self) -> None:
        with pytest.raises(ValueError):
            vertex_parser("int")("A")

    def test_unknown_name(self) -> None:
        with pytest.raises(ValueError, match="Unknown vertex type"):
            vertex_parser("uuid")
