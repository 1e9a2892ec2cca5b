"""
state.py
────────
Screen state for the walk history dialog.

ScreenState is an immutable (logs, loading) pair. HistoryState holds the
current one and notifies subscribers after every replacement, so the list
and the loading flag are always observed together.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Tuple

from models import WalkLog


@dataclass(frozen=True)
class ScreenState:
    logs: Tuple[WalkLog, ...] = ()
    loading: bool = False

    @classmethod
    def of(cls, logs, loading: bool) -> "ScreenState":
        return cls(logs=tuple(logs or ()), loading=bool(loading))


class HistoryState:
    """Observable holder for the current ScreenState."""

    def __init__(self, initial: ScreenState | None = None) -> None:
        self._screen = initial or ScreenState()
        self._subscribers: List[Callable[[ScreenState], None]] = []

    @property
    def screen(self) -> ScreenState:
        return self._screen

    @property
    def logs(self) -> Tuple[WalkLog, ...]:
        return self._screen.logs

    @property
    def loading(self) -> bool:
        return self._screen.loading

    def subscribe(self, callback: Callable[[ScreenState], None]) -> Callable[[], None]:
        """Register `callback(screen_state)`; returns an unsubscribe function."""
        self._subscribers.append(callback)

        def _unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe

    def replace(self, screen: ScreenState) -> None:
        self._screen = screen
        for callback in list(self._subscribers):
            callback(screen)
