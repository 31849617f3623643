"""Shared fixtures for mountstore tests."""

from datetime import datetime, timedelta

import pytest

from mountstore import StorageContext

USER = "user@example.com"
START = datetime(2000, 1, 1, 12, 0, 0)


class TickingClock:
    """Returns START, then one second later on every call."""

    def __init__(self, start: datetime = START):
        self.now = start

    def __call__(self) -> datetime:
        now = self.now
        self.now = now + timedelta(seconds=1)
        return now


@pytest.fixture
def clock():
    return TickingClock()


@pytest.fixture
def context(clock):
    return StorageContext(user=USER, clock=clock)


