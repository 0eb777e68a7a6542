"""Tests for querybind.convert: strict string-to-scalar parsers."""

import math

import pytest

from querybind.convert import (
    parse_bool,
    parse_float,
    parse_int,
    parse_uint,
    round_float32,
    wrap_int,
)


class TestParseInt:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("0", 0),
            ("123", 123),
            ("-45", -45),
            ("+7", 7),
            ("007", 7),
            ("9223372036854775807", 2**63 - 1),
            ("-9223372036854775808", -(2**63)),
        ],
    )
    def test_valid(self, text: str, expected: int) -> None:
        assert parse_int(text) == expected

    @pytest.mark.parametrize(
        "text",
        ["", "abc", "1.5", " 1", "1 ", "1_000", "0x10", "--1", "+", "9223372036854775808", "١٢"],
    )
    def test_invalid(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_int(text)


class TestParseUint:
    def test_valid(self) -> None:
        assert parse_uint("123") == 123
        assert parse_uint("18446744073709551615") == 2**64 - 1

    @pytest.mark.parametrize("text", ["-1", "+1", "", "18446744073709551616", "1e3"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_uint(text)


class TestWrapInt:
    @pytest.mark.parametrize(
        ("n", "bits", "signed", "expected"),
        [
            (300, 8, False, 44),
            (255, 8, False, 255),
            (127, 8, True, 127),
            (128, 8, True, -128),
            (200, 8, True, -56),
            (-1, 16, True, -1),
            (-1, 16, False, 65535),
            (70000, 16, False, 4464),
            (2**63 - 1, 64, True, 2**63 - 1),
        ],
    )
    def test_wrap(self, n: int, bits: int, signed: bool, expected: int) -> None:
        assert wrap_int(n, bits, signed=signed) == expected


class TestParseFloat:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("1", 1.0),
            ("1.5", 1.5),
            ("-2.25", -2.25),
            (".5", 0.5),
            ("5.", 5.0),
            ("1e3", 1000.0),
            ("1E-2", 0.01),
            ("0x1p-2", 0.25),
            ("123.456", 123.456),
        ],
    )
    def test_valid(self, text: str, expected: float) -> None:
        assert parse_float(text) == expected

    @pytest.mark.parametrize("text", ["inf", "+Inf", "Infinity", "-INF"])
    def test_infinity(self, text: str) -> None:
        assert math.isinf(parse_float(text))

    def test_nan(self) -> None:
        assert math.isnan(parse_float("NaN"))

    @pytest.mark.parametrize("text", ["", "abc", ".", "1e", " 1.0", "1_0.0", "1e400", "-1e400", "0x1p5000", "1,5"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_float(text)


class TestRoundFloat32:
    def test_rounds_to_single_precision(self) -> None:
        value = round_float32(0.1)
        assert value != 0.1
        assert value == pytest.approx(0.1, rel=1e-7)

    def test_exact_values_unchanged(self) -> None:
        assert round_float32(0.5) == 0.5

    def test_overflow_becomes_infinity(self) -> None:
        assert round_float32(1e39) == math.inf
        assert round_float32(-1e39) == -math.inf


class TestParseBool:
    @pytest.mark.parametrize("text", ["1", "t", "T", "TRUE", "true", "True"])
    def test_true(self, text: str) -> None:
        assert parse_bool(text) is True

    @pytest.mark.parametrize("text", ["0", "f", "F", "FALSE", "false", "False"])
    def test_false(self, text: str) -> None:
        assert parse_bool(text) is False

    @pytest.mark.parametrize("text", ["", "yes", "on", "tRuE", "2"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_bool(text)
