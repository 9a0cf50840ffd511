"""
Translator Module — Message to Line Protocol

Public API:
- PointTranslator: Resolves targets, builds points and submits them
- EncodedMessage: Serialized output of one message
- DataPoint: Point representation before serialization
- build_point: Structured payload to DataPoint
- decode_field / decode_tag / decode_timestamp: Value decoding
- FieldKind / FieldValue: Decoded field value types
- IncomingMessage: Host message model
"""

from .engine import EncodedMessage, PointTranslator
from .fields import decode_field, decode_tag, decode_timestamp
from .point import DataPoint, build_point, decompose_payload
from .schemas import FieldKind, FieldValue, IncomingMessage

__all__ = [
    "PointTranslator",
    "EncodedMessage",
    "DataPoint",
    "build_point",
    "decompose_payload",
    "decode_field",
    "decode_tag",
    "decode_timestamp",
    "FieldKind",
    "FieldValue",
    "IncomingMessage",
]
