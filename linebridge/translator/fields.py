"""
Value Decoding — Raw Payload Values to Typed Point Values

Every raw value is decoded into exactly one FieldKind before the point is
built, so the builder never inspects runtime shapes itself.

Legacy producers send integers as strings with a trailing "i" ("42i") or as
single-key objects ({"i": 42}, {"s": "text"}). Both forms are honoured.
"""

import math
import numbers
import re
from datetime import datetime, timedelta, timezone
from typing import Any, Mapping, Optional

from .schemas import FieldKind, FieldValue, NULL, UNSUPPORTED


INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

LEGACY_INTEGER_PATTERN = re.compile(r"([+-]?[0-9]+)i")

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _is_int64(value: Any) -> bool:
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and INT64_MIN <= value <= INT64_MAX
    )


def decode_string(value: str) -> FieldValue:
    """
    Decode a string field, honouring the legacy "<digits>i" integer form.

    The whole string must be an optionally signed run of digits followed by
    one "i"; "i", "4i2", "abci" and values outside int64 stay strings.
    """
    match = LEGACY_INTEGER_PATTERN.fullmatch(value)
    if match:
        number = int(match.group(1))
        if _is_int64(number):
            return FieldValue(FieldKind.INTEGER, number)
    return FieldValue(FieldKind.STRING, value)


def decode_legacy_object(value: Mapping[str, Any]) -> FieldValue:
    """
    Decode the object form some older producers emit.

    {"s": x} is an explicit string and wins over {"i": n}, an explicit
    integer. Any other object is unsupported.
    """
    if value.get("s") is not None:
        return FieldValue(FieldKind.STRING, str(value["s"]))
    if _is_int64(value.get("i")):
        return FieldValue(FieldKind.INTEGER, value["i"])
    return UNSUPPORTED


def decode_field(value: Any) -> FieldValue:
    """
    Decode any raw value into a FieldValue.

    Args:
        value: Value taken from the payload's field mapping

    Returns:
        FieldValue; NULL and UNSUPPORTED values are never written
    """
    if value is None:
        return NULL

    # bool is an int subclass, so it must be checked before numbers
    if isinstance(value, bool):
        return FieldValue(FieldKind.BOOLEAN, value)

    if isinstance(value, numbers.Real):
        try:
            number = float(value)
        except (OverflowError, ValueError):
            return UNSUPPORTED
        if not math.isfinite(number):
            return UNSUPPORTED
        return FieldValue(FieldKind.FLOAT, number)

    if isinstance(value, str):
        return decode_string(value)

    if isinstance(value, Mapping):
        return decode_legacy_object(value)

    return UNSUPPORTED


def decode_tag(value: Any) -> Optional[str]:
    """Return the tag's string form, or None when the tag must be skipped."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def decode_timestamp(value: Any) -> Optional[datetime]:
    """
    Resolve a timestamp to an instant.

    Numbers are epoch milliseconds. datetimes are used as they are.
    Anything else (or an out-of-range number) means no explicit timestamp.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        try:
            return EPOCH + timedelta(milliseconds=float(value))
        except (OverflowError, ValueError):
            return None
    return None
