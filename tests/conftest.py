"""
Shared test doubles: a controllable clock and an in-memory rate provider.
"""

from datetime import date, timedelta

import pytest

from application.services import ConversionService
from domain.exceptions.currency import ProviderError
from domain.models.currency import RateSnapshot
from infrastructure.cache.rate_cache import RateCache


class FakeClock:
    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, delta: timedelta | float) -> None:
        if isinstance(delta, timedelta):
            delta = delta.total_seconds()
        self.now += delta


class FakeProvider:
    """Serves canned rate tables and records every fetch."""

    def __init__(self, tables: dict | None = None, fetched_at: date = date(2024, 1, 1)):
        self.tables = tables if tables is not None else {'USD': {'EUR': 0.9, 'JPY': 150.0}}
        self.fetched_at = fetched_at
        self.calls: list[str] = []
        self.error: Exception | None = None
        self.closed = False

    @property
    def name(self) -> str:
        return 'fake'

    async def fetch_rates(self, base_currency: str) -> RateSnapshot:
        self.calls.append(base_currency)
        if self.error is not None:
            raise self.error
        if base_currency not in self.tables:
            raise ProviderError(f'no table for {base_currency}')
        return RateSnapshot(
            base=base_currency,
            rates=self.tables[base_currency],
            fetched_at=self.fetched_at,
        )

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def rate_cache(clock):
    return RateCache(clock=clock)


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def conversion_service(rate_cache, provider):
    return ConversionService(cache=rate_cache, provider=provider, today=lambda: date(2025, 6, 15))
