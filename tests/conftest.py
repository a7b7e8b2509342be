import uuid

import pytest

from cremawire.coffee_app import AppSettings


class FakeClock:
    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def lines():
    return []


@pytest.fixture
def settings():
    # Unique logger per test keeps ring buffers isolated.
    return AppSettings(logger_name=f"cremawire.test.{uuid.uuid4().hex}", log_ring_size=50)
