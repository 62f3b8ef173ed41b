# -*- coding: utf-8 -*-

from __future__ import annotations

import time
from typing import Any, Callable, Protocol


def mono_ms() -> int:
    return time.monotonic_ns() // 1_000_000


def wall_ms() -> int:
    return time.time_ns() // 1_000_000


class FrameScheduler(Protocol):
    """
    Redraw-synchronized callback source.
    request_frame() schedules fn once for the next frame and returns a handle
    that cancel_frame() accepts.
    """

    def request_frame(self, fn: Callable[[], None]) -> Any: ...

    def cancel_frame(self, handle: Any) -> None: ...
