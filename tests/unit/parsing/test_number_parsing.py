"""Test locale-free number parsing across all widths."""
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

import pytest

from numeric_ingestion.models.literal import DecisionKind, NumberConvention, NumericWidth, ParseError
from numeric_ingestion.parsing.number_parsing import (
    parse_number,
    try_parse,
    try_parse_decimal,
    try_parse_float32,
    try_parse_float64,
)
from numeric_ingestion.parsing.text_view import TextView
from tests.helpers import as_float32

DECIMAL_POINT = [
    ("0.74", "0.74"),
    ("1.34", "1.34"),
    ("391202.9", "391202.9"),
    ("-20.816", "-20.816"),
    ("15,019.33", "15019.33"),
]

DECIMAL_COMMA = [
    ("000,7832", "0.7832"),
    ("-0,499", "-0.499"),
    ("40593,84", "40593.84"),
    ("1.943.100,84", "1943100.84"),
]

INTEGERS = [
    ("15", "15"),
    ("-743923", "-743923"),
    ("239.482.392.923", "239482392923"),
    ("21,500,000", "21500000"),
]

VALID = DECIMAL_POINT + DECIMAL_COMMA + INTEGERS

INVALID = ["Foo", "Bar", "", None, "9392gk381"]


class TestTryParseDecimal:
    @pytest.mark.parametrize("text,expected", VALID)
    def test_valid(self, text, expected):
        assert try_parse_decimal(text) == (True, Decimal(expected))

    @pytest.mark.parametrize("text,expected", VALID)
    def test_valid_as_view(self, text, expected):
        assert try_parse_decimal(TextView(text)) == (True, Decimal(expected))

    @pytest.mark.parametrize("text", INVALID)
    def test_invalid(self, text):
        success, value = try_parse_decimal(text)
        assert success is False
        assert value == Decimal(0)
        assert isinstance(value, Decimal)

    def test_keeps_scale(self):
        assert str(try_parse_decimal("1,50")[1]) == "1.50"


class TestTryParseFloat64:
    @pytest.mark.parametrize("text,expected", VALID)
    def test_valid(self, text, expected):
        success, value = try_parse_float64(text)
        assert success is True
        assert value == pytest.approx(float(expected), abs=1e-7)

    @pytest.mark.parametrize("text,expected", VALID)
    def test_valid_as_bytes(self, text, expected):
        success, value = try_parse_float64(text.encode("ascii"))
        assert success is True
        assert value == float(expected)

    @pytest.mark.parametrize("text", INVALID)
    def test_invalid(self, text):
        assert try_parse_float64(text) == (False, 0.0)


class TestTryParseFloat32:
    @pytest.mark.parametrize("text,expected", VALID + [("482.392.923", "482392923")])
    def test_valid(self, text, expected):
        success, value = try_parse_float32(text)
        assert success is True
        assert value == as_float32(float(expected))

    @pytest.mark.parametrize("text", INVALID)
    def test_invalid(self, text):
        assert try_parse_float32(text) == (False, 0.0)

    def test_overflow(self):
        assert try_parse_float32("1" + "0" * 39) == (False, 0.0)

    def test_correctly_rounded_near_halfway(self):
        assert try_parse_float32("1,000000059604644775390625000000000001") == (True, 1 + 2**-23)


class TestTryParse:
    def test_defaults_to_decimal(self):
        assert try_parse("15,019.33") == (True, Decimal("15019.33"))

    def test_width_argument(self):
        assert try_parse("15,019.33", NumericWidth.FLOAT64) == (True, 15019.33)

    def test_window_over_line(self):
        line = "2024-01-31;1.943.100,84;EUR"
        assert try_parse_decimal(TextView(line, 11, 23)) == (True, Decimal("1943100.84"))

    def test_non_ascii_bytes_fail(self):
        assert try_parse_decimal(b"1\xb2") == (False, Decimal(0))

    def test_unsupported_type_is_contract_error(self):
        with pytest.raises(TypeError):
            try_parse_decimal(12.5)


class TestParseNumber:
    def test_success_details(self):
        outcome = parse_number("1.943.100,84")
        assert outcome.success is True
        assert outcome.value == Decimal("1943100.84")
        assert outcome.width == NumericWidth.DECIMAL
        assert outcome.canonical == "1943100.84"
        assert outcome.decision.kind == DecisionKind.BOTH_KINDS
        assert outcome.decision.convention == NumberConvention.DECIMAL_COMMA
        assert outcome.error is None

    def test_none(self):
        outcome = parse_number(None, NumericWidth.FLOAT64)
        assert outcome.success is False
        assert outcome.error == ParseError.EMPTY_OR_NULL
        assert outcome.value == 0.0

    def test_error_codes(self):
        assert parse_number("").error == ParseError.EMPTY_OR_NULL
        assert parse_number("9392gk381").error == ParseError.INVALID_CHARACTER
        assert parse_number("1.2,3.4").error == ParseError.MALFORMED_SEPARATORS
        assert parse_number("-").error == ParseError.NO_DIGITS
        assert parse_number("1" + "0" * 30).error == ParseError.OVERFLOW

    def test_failure_has_no_canonical(self):
        outcome = parse_number("Foo")
        assert outcome.canonical is None
        assert outcome.decision is None
        assert outcome.value == Decimal(0)


class TestProperties:
    def test_single_occurrence_is_decimal_point(self):
        for fraction in ["5", "50", "500", "5000", "50000"]:
            assert try_parse_decimal(f"1,{fraction}") == (True, Decimal(f"1.{fraction}"))
            assert try_parse_decimal(f"1.{fraction}") == (True, Decimal(f"1.{fraction}"))

    def test_repeated_separator_is_deleted(self):
        for text in ["1.000.000", "12,34,56", "1.2.3", "9,999,999"]:
            expected = Decimal(text.replace(".", "").replace(",", ""))
            assert try_parse_decimal(text) == (True, expected)

    def test_thousands_deleted_when_both_kinds(self):
        assert try_parse_decimal("1.2.3,4") == (True, Decimal("123.4"))
        assert try_parse_decimal("12,3.45") == (True, Decimal("123.45"))

    def test_outside_alphabet_fails(self):
        for char in "+ e_$€' ٣":
            assert try_parse_decimal(f"1{char}5")[0] is False

    def test_round_trip_decimal(self):
        for text, _ in VALID:
            _, value = try_parse_decimal(text)
            assert try_parse_decimal(str(value)) == (True, value)

    def test_round_trip_floats(self):
        for text, _ in VALID:
            _, value = try_parse_float64(text)
            assert try_parse_float64(repr(value)) == (True, value)
            _, single = try_parse_float32(text)
            assert try_parse_float32(repr(single)) == (True, single)

    def test_deterministic_across_threads(self):
        texts = [text for text, _ in VALID] + ["Foo", "", "1.2,3.4"] * 3
        expected = [try_parse_decimal(text) for text in texts]
        with ThreadPoolExecutor(max_workers=8) as pool:
            for _ in range(20):
                assert list(pool.map(try_parse_decimal, texts)) == expected
