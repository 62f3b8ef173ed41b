# -*- coding: utf-8 -*-

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from forest_focus.domain.models import Mode

logger = logging.getLogger(__name__)

SessionCompletedListener = Callable[[Mode], None]


class SessionStateMachine:
    """
    focus <-> break, cycling forever.
    session_count counts completed focus intervals only.

    complete() order: switch mode -> on_enter(new mode) -> notify listeners
    with the mode that just ended.
    """

    def __init__(self, mode: Mode = Mode.FOCUS, session_count: int = 0):
        self.mode = mode
        self.session_count = max(0, int(session_count))
        self._listeners: List[SessionCompletedListener] = []
        self._on_enter: Optional[Callable[[Mode], None]] = None

    def set_on_enter(self, fn: Callable[[Mode], None]) -> None:
        self._on_enter = fn

    def subscribe(self, fn: SessionCompletedListener) -> Callable[[], None]:
        self._listeners.append(fn)

        def _unsubscribe() -> None:
            if fn in self._listeners:
                self._listeners.remove(fn)

        return _unsubscribe

    def complete(self) -> Mode:
        finished = self.mode
        if finished is Mode.FOCUS:
            self.session_count += 1
            self.mode = Mode.BREAK
        else:
            self.mode = Mode.FOCUS

        logger.info(
            "%s interval complete, entering %s (sessions=%d)",
            finished.label,
            self.mode.value,
            self.session_count,
        )

        if self._on_enter:
            self._on_enter(self.mode)
        self._emit_completed(finished)
        return finished

    def _emit_completed(self, finished: Mode) -> None:
        for fn in list(self._listeners):
            try:
                fn(finished)
            except Exception:
                logger.exception("session-completed listener %r failed", fn)
