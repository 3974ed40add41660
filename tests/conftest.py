from typing import Callable

import httpx
import pytest

BASE_URL = "https://api.us-west-1.saucelabs.com/"


class FakeClock:
    """Stands in for time.monotonic and time.sleep: sleeping advances the clock instantly."""

    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def make_client():
    """Builds an httpx.Client whose requests are answered by the given handler."""
    clients = []

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.Client:
        client = httpx.Client(base_url=BASE_URL, transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.close()
