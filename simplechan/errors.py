"""Exceptions raised by channel operations."""

from __future__ import annotations

import enum
from typing import Any


class ChannelError(Exception):
    """Base class for all channel errors."""


class SendError(ChannelError):
    """Raised when sending on a channel whose receiver is gone.

    The value that could not be delivered is kept in ``value``.
    """

    def __init__(self, value: Any) -> None:
        super().__init__("sending on a disconnected channel")
        self.value = value

    def __repr__(self) -> str:
        return "SendError(..)"


class RecvError(ChannelError):
    """Raised when receiving on an empty channel with no senders left."""

    def __init__(self) -> None:
        super().__init__("receiving on an empty and disconnected channel")


class TryRecvKind(enum.Enum):
    """Why a non-blocking receive produced no value."""

    EMPTY = "empty"
    DISCONNECTED = "disconnected"


_TRY_RECV_MESSAGES = {
    TryRecvKind.EMPTY: "receiving on an empty channel",
    TryRecvKind.DISCONNECTED: "receiving on an empty and disconnected channel",
}


class TryRecvError(ChannelError):
    """Raised by a non-blocking receive that found no value."""

    def __init__(self, kind: TryRecvKind) -> None:
        kind = TryRecvKind(kind)
        super().__init__(_TRY_RECV_MESSAGES[kind])
        self.kind = kind

    def __repr__(self) -> str:
        return f"TryRecvError({self.kind.name})"