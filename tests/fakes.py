# tests/fakes.py

from __future__ import annotations

from datetime import datetime, timedelta, timezone


class FakeClock:
    """
    Deterministic clock for TaskStore.

    - Starts at a fixed aware datetime
    - Advances by `step` on every call, so later writes always get later timestamps
    """

    def __init__(
        self,
        start: datetime | None = None,
        step: timedelta = timedelta(seconds=1),
    ) -> None:
        self.current = start or datetime(2024, 5, 1, 9, 30, 0, 123456, tzinfo=timezone.utc)
        self.step = step
        self.calls = 0

    def __call__(self) -> datetime:
        now = self.current
        self.current = now + self.step
        self.calls += 1
        return now
