"""
Value Decoding Tests — Field, Tag and Timestamp Classification

Tests cover:
- Numbers always decode to FLOAT, booleans to BOOLEAN
- Legacy "<digits>i" strings decode to INTEGER, everything else stays STRING
- Legacy {"s": ...} / {"i": ...} objects
- Null and unsupported shapes are never writable
- Epoch-millisecond timestamps
"""

import math
from datetime import datetime, timezone

import pytest

from linebridge.translator import FieldKind, decode_field, decode_tag, decode_timestamp


class TestNumericAndBoolean:
    """Numbers become floats, booleans stay booleans."""

    @pytest.mark.parametrize("raw", [0, 7, -3, 21.5, 1e20])
    def test_numbers_decode_to_float(self, raw):
        decoded = decode_field(raw)
        assert decoded.kind == FieldKind.FLOAT
        assert isinstance(decoded.value, float)
        assert decoded.value == float(raw)

    @pytest.mark.parametrize("raw", [True, False])
    def test_booleans_decode_to_boolean(self, raw):
        """bool is an int subclass and must not be taken for a number."""
        decoded = decode_field(raw)
        assert decoded.kind == FieldKind.BOOLEAN
        assert decoded.value is raw

    @pytest.mark.parametrize("raw", [math.nan, math.inf, -math.inf, 10 ** 400])
    def test_unrepresentable_numbers_are_unsupported(self, raw):
        assert decode_field(raw).kind == FieldKind.UNSUPPORTED


class TestStrings:
    """Plain strings and the legacy integer suffix."""

    def test_legacy_integer(self):
        decoded = decode_field("10i")
        assert decoded.kind == FieldKind.INTEGER
        assert decoded.value == 10

    def test_signed_legacy_integer(self):
        assert decode_field("-42i").value == -42
        assert decode_field("+7i").value == 7

    def test_digits_without_marker_stay_string(self):
        decoded = decode_field("10")
        assert decoded.kind == FieldKind.STRING
        assert decoded.value == "10"

    def test_plain_text_stays_string(self):
        decoded = decode_field("abc")
        assert decoded.kind == FieldKind.STRING
        assert decoded.value == "abc"

    @pytest.mark.parametrize("raw", ["i", "4i2", "abci", "1.5i", "10ii", " 10i", "", "42i\n", "\n42i", "４２i"])
    def test_non_integer_prefixes_stay_string(self, raw):
        decoded = decode_field(raw)
        assert decoded.kind == FieldKind.STRING
        assert decoded.value == raw

    def test_out_of_int64_range_stays_string(self):
        raw = f"{2 ** 63}i"
        decoded = decode_field(raw)
        assert decoded.kind == FieldKind.STRING
        assert decoded.value == raw

    def test_int64_bounds_are_integers(self):
        assert decode_field(f"{2 ** 63 - 1}i").kind == FieldKind.INTEGER
        assert decode_field(f"{-(2 ** 63)}i").kind == FieldKind.INTEGER


class TestLegacyObjects:
    """Object-shaped values from older producers."""

    def test_explicit_string(self):
        decoded = decode_field({"s": "hello"})
        assert decoded.kind == FieldKind.STRING
        assert decoded.value == "hello"

    def test_explicit_string_is_stringified(self):
        assert decode_field({"s": 12}).value == "12"

    def test_explicit_integer(self):
        decoded = decode_field({"i": 42})
        assert decoded.kind == FieldKind.INTEGER
        assert decoded.value == 42

    def test_string_marker_wins_over_integer_marker(self):
        assert decode_field({"s": "x", "i": 1}).kind == FieldKind.STRING

    @pytest.mark.parametrize("raw", [{}, {"i": 1.5}, {"i": True}, {"i": "3"}, {"s": None}, {"v": 1}])
    def test_other_objects_are_unsupported(self, raw):
        assert decode_field(raw).kind == FieldKind.UNSUPPORTED


class TestUnwritableShapes:
    """Values that are silently dropped from the point."""

    def test_null(self):
        decoded = decode_field(None)
        assert decoded.kind == FieldKind.NULL
        assert decoded.is_writable is False

    @pytest.mark.parametrize("raw", [[1, 2], (1,), {1, 2}, b"bytes", object()])
    def test_other_shapes_are_unsupported(self, raw):
        decoded = decode_field(raw)
        assert decoded.kind == FieldKind.UNSUPPORTED
        assert decoded.is_writable is False


class TestTags:
    """Tag values are coerced to strings."""

    def test_null_tag_is_skipped(self):
        assert decode_tag(None) is None

    def test_values_are_stringified(self):
        assert decode_tag("a") == "a"
        assert decode_tag(3) == "3"
        assert decode_tag(2.5) == "2.5"

    def test_booleans_are_lowercase(self):
        assert decode_tag(True) == "true"
        assert decode_tag(False) == "false"


class TestTimestamps:
    """Timestamp resolution."""

    def test_epoch_milliseconds(self):
        assert decode_timestamp(1700000000000) == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)

    def test_fractional_milliseconds(self):
        ts = decode_timestamp(1500.5)
        assert ts == datetime(1970, 1, 1, 0, 0, 1, 500500, tzinfo=timezone.utc)

    def test_datetime_passes_through(self):
        now = datetime.now(timezone.utc)
        assert decode_timestamp(now) is now

    @pytest.mark.parametrize("raw", [None, "2024-01-01T00:00:00Z", True, {}, math.nan, 1e30])
    def test_anything_else_is_unset(self, raw):
        assert decode_timestamp(raw) is None
