"""
Translator Schemas — Message and Field Value Models

IncomingMessage is the boundary model for host messages. FieldValue is the
closed set of shapes a payload value can decode to; the point builder only
ever matches on FieldKind.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from linebridge.errors import InvalidPayloadError


class FieldKind(str, Enum):
    """Decoded shape of a raw field value."""
    FLOAT = "float"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    STRING = "string"
    NULL = "null"
    UNSUPPORTED = "unsupported"


WRITABLE_KINDS = frozenset({
    FieldKind.FLOAT,
    FieldKind.INTEGER,
    FieldKind.BOOLEAN,
    FieldKind.STRING,
})


@dataclass(frozen=True)
class FieldValue:
    """A field value tagged with its decoded kind."""
    kind: FieldKind
    value: Any = None

    @property
    def is_writable(self) -> bool:
        return self.kind in WRITABLE_KINDS


NULL = FieldValue(FieldKind.NULL)
UNSUPPORTED = FieldValue(FieldKind.UNSUPPORTED)


class IncomingMessage(BaseModel):
    """
    One message delivered by the host.
    
    Only payload, measurement, database and timestamp are interpreted.
    Any other keys are kept so the original message can be forwarded.
    """
    model_config = ConfigDict(extra="allow", arbitrary_types_allowed=True)
    
    payload: Any = None
    measurement: Optional[str] = None
    database: Optional[str] = None
    timestamp: Any = None

    @field_validator("measurement", "database", mode="before")
    @classmethod
    def normalize_name(cls, v: Any) -> Optional[str]:
        """Empty or non-scalar names count as unset; numbers become strings."""
        if isinstance(v, str):
            return v or None
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return None

    @classmethod
    def from_message(cls, message: Any) -> "IncomingMessage":
        """
        Validate a raw host message.
        
        Raises:
            InvalidPayloadError: If the message is not a mapping with string keys
        """
        if isinstance(message, cls):
            return message
        if not isinstance(message, Mapping):
            raise InvalidPayloadError(
                f"Message must be a mapping, got {type(message).__name__}"
            )
        try:
            return cls.model_validate(dict(message))
        except ValidationError as e:
            raise InvalidPayloadError(f"Invalid message: {e}") from e
