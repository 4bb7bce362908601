# ABOUTME: Timer-based debounce controller on top of the asyncio event loop.
# ABOUTME: Publishes a value only after pushes have stopped for the quiescence window.

import asyncio
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class Debouncer(Generic[T]):
    """Settle a rapidly changing value after `delay` seconds of quiet.

    Each `push` cancels the pending timer and starts a new one, so a burst of pushes
    publishes at most once, with the last value. Must be used from a running loop.
    """

    def __init__(self, delay: float, callback: Callable[[T], None]):
        self.delay = delay
        self._callback = callback
        self._handle: asyncio.TimerHandle | None = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def push(self, value: T) -> None:
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self._fire, value)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, value: T) -> None:
        self._handle = None
        self._callback(value)
