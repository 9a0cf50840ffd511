"""
Write Node — Host-Facing Entry Point

The host delivers one message at a time to on_input() and receives the
outcome through two callbacks:
    send(message)   forward the original, unmodified message downstream
    done(error)     signal completion; error is None on success

Hosts that predate the callback convention may omit both. The node then
forwards to its wired outputs and logs failures itself.
"""

import logging
from typing import Any, Callable, List, Optional

from linebridge.config import settings
from linebridge.errors import LineBridgeError
from linebridge.status import ERROR, NO_CONFIG, WRITTEN, StatusIndicator
from linebridge.storage import ConnectionResolver
from linebridge.translator import EncodedMessage, PointTranslator


logger = logging.getLogger(__name__)

SendCallback = Callable[[Any], Any]
DoneCallback = Callable[..., Any]


class WriteNode:
    """
    Writes each incoming message to the store and reports the outcome.

    A node built without a resolver is inert: it reports "no config" once
    and ignores every message.
    """

    def __init__(
        self,
        resolver: Optional[ConnectionResolver],
        measurement: Optional[str] = None,
        database: Optional[str] = None,
        name: str = "",
        reset_after: Optional[float] = None
    ):
        self.name = name or "write"
        self.reset_after = settings.STATUS_RESET_SECONDS if reset_after is None else reset_after
        self.status = StatusIndicator()
        self.translator: Optional[PointTranslator] = None
        self._outputs: List[SendCallback] = []

        if resolver is None:
            logger.error(f"[{self.name}] Store connection config not set")
            self.status.set(NO_CONFIG)
            return

        self.translator = PointTranslator(resolver, measurement=measurement, database=database)

    @property
    def is_inert(self) -> bool:
        return self.translator is None

    def wire(self, output: SendCallback) -> None:
        """Attach a downstream consumer used when the host gives no send()."""
        self._outputs.append(output)

    def send(self, message: Any) -> None:
        for output in self._outputs:
            output(message)

    async def on_input(
        self,
        message: Any,
        send: Optional[SendCallback] = None,
        done: Optional[DoneCallback] = None
    ) -> Optional[EncodedMessage]:
        """
        Process one message.

        Returns:
            The encoded write on success, None on failure or when inert
        """
        if self.translator is None:
            return None

        send = send or self.send
        if done is None:
            def done(error: Optional[BaseException] = None) -> None:
                self._report(error, message)

        try:
            encoded = await self.translator.translate(message)
        except LineBridgeError as e:
            self.status.set(ERROR)
            done(e)
            return None

        self.status.set(WRITTEN, reset_after=self.reset_after)
        send(message)
        done()
        return encoded

    def _report(self, error: Optional[BaseException], message: Any) -> None:
        if error is not None:
            logger.error(f"[{self.name}] {error} (message: {message!r})")

    async def close(self) -> None:
        """Cancel any pending status reset and return to idle."""
        self.status.clear()
