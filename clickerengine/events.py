from __future__ import annotations

from collections import deque
from dataclasses import dataclass

from clickerengine._types import U64_MAX


@dataclass(frozen=True)
class ClicksEmitted:
    """Resource produced by one click, clap or automatic clap."""

    amount: int


class EventLog:
    """FIFO of accumulation events, drained once per tick."""

    def __init__(self) -> None:
        self._queue: deque[ClicksEmitted] = deque()

    def emit(self, amount: int) -> ClicksEmitted:
        if amount < 0 or amount > U64_MAX:
            raise ValueError(f"Event amount out of range: {amount!r}")
        event = ClicksEmitted(amount)
        self._queue.append(event)
        return event

    def drain(self) -> list[ClicksEmitted]:
        events = list(self._queue)
        self._queue.clear()
        return events

    def __len__(self) -> int:
        return len(self._queue)
