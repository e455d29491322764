"""Bounded multi-producer, single-consumer channel."""

from __future__ import annotations

import threading
from typing import Any, Iterator

from .errors import RecvError, SendError, TryRecvError, TryRecvKind
from .ring_buffer import RingBuffer


class _Shared:
    """State shared by every endpoint of one channel."""

    def __init__(self, capacity: int) -> None:
        self.buffer = RingBuffer(capacity)
        self.cond = threading.Condition()
        self.senders = 1
        self.receiver_alive = True


class Sender:
    """The sending side of a channel. Clone it to get more producers."""

    def __init__(self, shared: _Shared) -> None:
        self._shared = shared
        self._closed = False

    def _check_open(self) -> None:
        if self._closed:
            raise ValueError("sender is closed")

    def send(self, value: Any) -> None:
        """Send ``value``, blocking while the buffer is full.

        Raises SendError if the receiver has been closed.
        """
        self._check_open()
        shared = self._shared
        with shared.cond:
            while True:
                if not shared.receiver_alive:
                    raise SendError(value)
                if shared.buffer.push(value):
                    shared.cond.notify_all()
                    return
                shared.cond.wait()

    def clone(self) -> Sender:
        """Return a new sender for the same channel."""
        self._check_open()
        shared = self._shared
        with shared.cond:
            shared.senders += 1
        return Sender(shared)

    def close(self) -> None:
        """Release this sender. Closing twice has no further effect."""
        if self._closed:
            return
        self._closed = True
        shared = self._shared
        with shared.cond:
            shared.senders -= 1
            shared.cond.notify_all()

    def __enter__(self) -> Sender:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class Receiver:
    """The receiving side of a channel."""

    def __init__(self, shared: _Shared) -> None:
        self._shared = shared
        self._closed = False

    def _check_open(self) -> None:
        if self._closed:
            raise ValueError("receiver is closed")

    def recv(self) -> Any:
        """Return the next value, blocking until one is available.

        Raises RecvError once the channel is empty and every sender is closed.
        """
        self._check_open()
        shared = self._shared
        with shared.cond:
            while True:
                try:
                    value = shared.buffer.pop()
                except IndexError:
                    if shared.senders == 0:
                        raise RecvError() from None
                    shared.cond.wait()
                else:
                    shared.cond.notify_all()
                    return value

    def try_recv(self) -> Any:
        """Return the next value without blocking.

        Raises TryRecvError with kind EMPTY or DISCONNECTED if none is ready.
        """
        self._check_open()
        shared = self._shared
        with shared.cond:
            try:
                value = shared.buffer.pop()
            except IndexError:
                kind = (
                    TryRecvKind.DISCONNECTED
                    if shared.senders == 0
                    else TryRecvKind.EMPTY
                )
                raise TryRecvError(kind) from None
            shared.cond.notify_all()
            return value

    def close(self) -> None:
        """Release the receiver; later sends fail with SendError."""
        if self._closed:
            return
        self._closed = True
        shared = self._shared
        with shared.cond:
            shared.receiver_alive = False
            shared.cond.notify_all()

    def __iter__(self) -> Iterator[Any]:
        """Yield values until the channel is empty and disconnected."""
        while True:
            try:
                yield self.recv()
            except RecvError:
                return

    def __enter__(self) -> Receiver:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


def bounded(capacity: int) -> tuple[Sender, Receiver]:
    """Create a channel holding at most ``capacity`` values (a power of two)."""
    shared = _Shared(capacity)
    return Sender(shared), Receiver(shared)