from dataclasses import dataclass
from datetime import date, timedelta
from types import MappingProxyType
from typing import Mapping

SUPPORTED_CURRENCIES: tuple[str, ...] = (
    'USD', 'EUR', 'GBP', 'JPY', 'TWD', 'CNY',
    'KRW', 'HKD', 'SGD', 'AUD', 'CAD', 'CHF',
)

RATE_CACHE_TTL = timedelta(hours=1)
PROVIDER_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class RateSnapshot:
    base: str
    rates: Mapping[str, float]
    fetched_at: date

    def __post_init__(self):
        # freeze the table so a cached snapshot can be shared between requests
        object.__setattr__(self, 'rates', MappingProxyType(dict(self.rates)))

    def rate_for(self, currency: str) -> float | None:
        return self.rates.get(currency.upper())


@dataclass(frozen=True)
class ConversionResult:
    amount: float
    from_currency: str
    to_currency: str
    rate: float
    converted_amount: float
    last_update: date
