"""
Point Builder — Structured Payload to Time-Series Point

Schema mapping:
    payload.fields      -> typed fields (or every other key, when absent)
    payload.tags        -> string tags
    payload.timestamp   -> point time (falls back to the message timestamp)

The wire grammar (escaping, tag ordering, integer suffix, quoting) belongs
to the influxdb_client Point serializer and is not reproduced here.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Mapping, Optional, Tuple

from influxdb_client import Point, WritePrecision

from linebridge.errors import InvalidFieldsError, NoFieldsError
from .fields import decode_field, decode_tag, decode_timestamp
from .schemas import FieldValue


logger = logging.getLogger(__name__)

RESERVED_KEYS = ("fields", "tags", "timestamp")


@dataclass
class DataPoint:
    """One point before serialization."""
    measurement: str
    tags: Dict[str, str] = field(default_factory=dict)
    fields: Dict[str, FieldValue] = field(default_factory=dict)
    timestamp: Optional[datetime] = None

    def to_point(self) -> Point:
        """Build the client library Point for this record."""
        point = Point(self.measurement)
        for key, value in self.tags.items():
            point.tag(key, value)
        for key, value in self.fields.items():
            point.field(key, value.value)
        if self.timestamp is not None:
            point.time(self.timestamp, WritePrecision.NS)
        return point

    def to_line_protocol(self) -> str:
        return self.to_point().to_line_protocol()


def decompose_payload(
    payload: Mapping[str, Any],
    message_timestamp: Any = None
) -> Tuple[Mapping[Any, Any], Mapping[Any, Any], Any]:
    """
    Split a structured payload into (fields, tags, timestamp).

    Flat payloads without a "fields" object use every non-reserved key as
    a field.

    Args:
        payload: Structured message payload
        message_timestamp: Message-level timestamp used when the payload has none

    Returns:
        Raw (undecoded) fields, tags and timestamp
    """
    remainder = {k: v for k, v in payload.items() if k not in RESERVED_KEYS}

    fields = payload.get("fields")
    tags = payload.get("tags")
    timestamp = payload.get("timestamp")

    if not isinstance(tags, Mapping):
        tags = {}
    if timestamp is None:
        timestamp = message_timestamp
    if not isinstance(fields, Mapping):
        fields = remainder

    return fields, tags, timestamp


def build_point(
    measurement: str,
    payload: Mapping[str, Any],
    message_timestamp: Any = None
) -> DataPoint:
    """
    Build a DataPoint from a structured payload.

    Null tags and fields are skipped, as are field values with no
    writable shape (lists, unrecognised objects, non-finite numbers).

    Raises:
        InvalidFieldsError: If a field name is not a non-empty string
        NoFieldsError: If no writable field remains
    """
    fields, tags, timestamp = decompose_payload(payload, message_timestamp)

    point = DataPoint(measurement=measurement, timestamp=decode_timestamp(timestamp))

    for key, value in tags.items():
        tag = decode_tag(value)
        if tag is not None:
            point.tags[str(key)] = tag

    for key, value in fields.items():
        if not isinstance(key, str) or not key:
            raise InvalidFieldsError(
                f"Invalid field name {key!r}: field names must be non-empty strings"
            )

        decoded = decode_field(value)
        if decoded.is_writable:
            point.fields[key] = decoded
        else:
            logger.debug(f"Skipping field '{key}' ({decoded.kind.value})")

    if not point.fields:
        raise NoFieldsError("No fields to write - at least one field is required")

    return point
