"""
Node Status — Observable Status Badge with a Single Reset Timer

Status changes are purely observational and never affect data flow. One
reset timer exists per indicator; setting a new status cancels the
pending reset instead of stacking timers.
"""

import asyncio
import logging
from dataclasses import asdict, dataclass
from typing import Callable, Dict, List, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NodeStatus:
    """Badge shown by the host: colour, shape and short text."""
    fill: str = ""
    shape: str = ""
    text: str = ""

    @property
    def is_idle(self) -> bool:
        return not (self.fill or self.shape or self.text)

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


IDLE = NodeStatus()
WRITTEN = NodeStatus(fill="green", shape="dot", text="written")
ERROR = NodeStatus(fill="red", shape="dot", text="error")
NO_CONFIG = NodeStatus(fill="red", shape="dot", text="no config")

StatusListener = Callable[[NodeStatus], None]


class StatusIndicator:
    """Current status of one node plus its pending reset, if any."""

    def __init__(self):
        self._status: NodeStatus = IDLE
        self._reset_handle: Optional[asyncio.TimerHandle] = None
        self._listeners: List[StatusListener] = []

    @property
    def current(self) -> NodeStatus:
        return self._status

    @property
    def reset_pending(self) -> bool:
        return self._reset_handle is not None

    def subscribe(self, listener: StatusListener) -> None:
        self._listeners.append(listener)

    def set(self, status: NodeStatus, reset_after: Optional[float] = None) -> None:
        """
        Publish a status, optionally returning to idle after a delay.
        
        Scheduling a reset requires a running event loop.
        """
        self.cancel_reset()
        self._publish(status)
        if reset_after is not None:
            loop = asyncio.get_running_loop()
            self._reset_handle = loop.call_later(reset_after, self._reset)

    def clear(self) -> None:
        self.cancel_reset()
        self._publish(IDLE)

    def cancel_reset(self) -> None:
        if self._reset_handle is not None:
            self._reset_handle.cancel()
            self._reset_handle = None

    def _reset(self) -> None:
        self._reset_handle = None
        self._publish(IDLE)

    def _publish(self, status: NodeStatus) -> None:
        self._status = status
        logger.debug(f"Status -> {status.text or 'idle'}")
        for listener in self._listeners:
            listener(status)
