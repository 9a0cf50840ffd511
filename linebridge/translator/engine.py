"""
Point Translator — One Message In, One Write Out

Pipeline per message:
    1. Resolve database (message > node > connection default)
    2. Classify payload (text is passed through verbatim, mappings are built)
    3. Resolve measurement (message > node)
    4-5. Decompose the payload and build the point
    6. Serialize to line protocol
    7. Submit through the resolver's client handle

Every step raises a TranslationError subclass on violation. Nothing is
retried here.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from linebridge.errors import (
    MissingDatabaseError,
    MissingMeasurementError,
    InvalidPayloadError,
    SubmissionError,
)
from linebridge.storage import ConnectionResolver
from .point import DataPoint, build_point
from .schemas import IncomingMessage


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EncodedMessage:
    """Serialized output of one message, ready to submit."""
    database: str
    line_protocol: str
    point: Optional[DataPoint] = None

    @property
    def is_passthrough(self) -> bool:
        """True when the payload was already line protocol text."""
        return self.point is None


class PointTranslator:
    """
    Translate host messages into line protocol writes.

    The node-level measurement and database are fixed at construction.
    The resolver supplies the default database and the shared client.
    """

    def __init__(
        self,
        resolver: ConnectionResolver,
        measurement: Optional[str] = None,
        database: Optional[str] = None
    ):
        self.resolver = resolver
        self.measurement = measurement or None
        self.database = database or None

    def resolve_database(self, message: IncomingMessage) -> str:
        database = message.database or self.database or self.resolver.default_database
        if not database:
            raise MissingDatabaseError("Database not specified")
        return database

    def resolve_measurement(self, message: IncomingMessage) -> str:
        measurement = message.measurement or self.measurement
        if not measurement:
            raise MissingMeasurementError("Measurement not specified")
        return measurement

    def encode(self, message: Any) -> EncodedMessage:
        """
        Turn a message into line protocol text without touching the store.

        Args:
            message: Raw host message (mapping) or IncomingMessage

        Returns:
            EncodedMessage with the target database and serialized text

        Raises:
            TranslationError: If any validation step fails
        """
        message = IncomingMessage.from_message(message)
        database = self.resolve_database(message)
        payload = message.payload

        if isinstance(payload, str):
            return EncodedMessage(database=database, line_protocol=payload)

        if not isinstance(payload, Mapping):
            raise InvalidPayloadError(
                "Invalid payload format. Expected string (line protocol) "
                "or object with fields"
            )

        measurement = self.resolve_measurement(message)
        point = build_point(measurement, payload, message.timestamp)

        return EncodedMessage(
            database=database,
            line_protocol=point.to_line_protocol(),
            point=point,
        )

    async def translate(self, message: Any) -> EncodedMessage:
        """
        Encode a message and write it to the store.

        Raises:
            TranslationError: If the message is invalid
            SubmissionError: If the store write fails
            ConfigurationError: If the store client cannot be created
        """
        encoded = self.encode(message)
        client = self.resolver.get_client()

        try:
            await client.write(encoded.line_protocol, encoded.database)
        except Exception as e:
            raise SubmissionError(f"Write failed: {e}", cause=e) from e

        logger.debug(
            f"[WRITE] database={encoded.database} | "
            f"{'passthrough' if encoded.is_passthrough else encoded.point.measurement}"
        )
        return encoded
