from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from ticket_desk.storage import InMemoryKeyValueStore
from ticket_desk.tickets import TicketManager


class FakeClock:
    def __init__(self, start: datetime | None = None, step: timedelta = timedelta(seconds=1)):
        self.now = start or datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)
        self.step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now = current + self.step
        return current


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def manager(store, clock) -> TicketManager:
    return TicketManager(store, clock=clock, seed_samples=False)
