import asyncio
import logging
import math
from collections.abc import Callable, Iterable
from datetime import UTC, date, datetime

from domain.exceptions.currency import (
	InvalidAmountError,
	InvalidCurrencyError,
	ProviderError,
	RateNotFoundError,
)
from domain.models.currency import (
	PROVIDER_TIMEOUT_SECONDS,
	SUPPORTED_CURRENCIES,
	ConversionResult,
	RateSnapshot,
)
from infrastructure.cache.rate_cache import RateCache
from infrastructure.providers.base import RateProvider

logger = logging.getLogger(__name__)

PROVIDER_UNAVAILABLE_MESSAGE = 'unable to fetch latest exchange rate data'


def utc_today() -> date:
	return datetime.now(UTC).date()


class ConversionService:
	"""Validates conversion requests and serves rate tables through the cache."""

	def __init__(
		self,
		cache: RateCache,
		provider: RateProvider,
		supported_currencies: Iterable[str] = SUPPORTED_CURRENCIES,
		timeout: float = PROVIDER_TIMEOUT_SECONDS,
		today: Callable[[], date] = utc_today,
	):
		self.cache = cache
		self.provider = provider
		self.timeout = timeout
		self._today = today
		self._supported = tuple(code.upper() for code in supported_currencies)
		self._inflight: dict[str, asyncio.Task] = {}

	@property
	def supported_currencies(self) -> tuple[str, ...]:
		return self._supported

	def is_valid_currency(self, code: str | None) -> bool:
		if not isinstance(code, str) or not code:
			return False
		return code.upper() in self._supported

	async def get_rates(self, base_currency: str) -> RateSnapshot:
		key = self.cache.make_key(base_currency)

		cached = self.cache.get(key)
		if cached is not None:
			logger.info(f'Using cached rates for {key}')
			return cached

		# concurrent misses for one base await the same fetch and share its outcome
		task = self._inflight.get(key)
		if task is None:
			task = asyncio.create_task(self._fetch_and_store(key))
			self._inflight[key] = task
		return await asyncio.shield(task)

	async def _fetch_and_store(self, key: str) -> RateSnapshot:
		try:
			logger.info(f'Fetching rates for {key} from {self.provider.name}')
			try:
				async with asyncio.timeout(self.timeout):
					snapshot = await self.provider.fetch_rates(key)
			except ProviderError as e:
				logger.error(f'Provider {self.provider.name} failed for {key}: {e}')
				raise ProviderError(PROVIDER_UNAVAILABLE_MESSAGE) from e
			except TimeoutError as e:
				logger.error(f'Provider {self.provider.name} timed out after {self.timeout}s for {key}')
				raise ProviderError(PROVIDER_UNAVAILABLE_MESSAGE) from e

			self.cache.set(key, snapshot)
			return snapshot
		finally:
			self._inflight.pop(key, None)

	async def convert(self, amount, from_currency: str, to_currency: str) -> ConversionResult:
		amount = self._parse_amount(amount)

		if not self.is_valid_currency(from_currency):
			raise InvalidCurrencyError(f'unsupported source currency: {from_currency}')
		if not self.is_valid_currency(to_currency):
			raise InvalidCurrencyError(f'unsupported target currency: {to_currency}')

		from_currency = from_currency.upper()
		to_currency = to_currency.upper()

		if from_currency == to_currency:
			return ConversionResult(
				amount=amount,
				from_currency=from_currency,
				to_currency=to_currency,
				rate=1.0,
				converted_amount=amount,
				last_update=self._today(),
			)

		snapshot = await self.get_rates(from_currency)

		rate = snapshot.rate_for(to_currency)
		if not rate or rate <= 0:
			raise RateNotFoundError(f'no rate found from {from_currency} to {to_currency}')

		return ConversionResult(
			amount=amount,
			from_currency=from_currency,
			to_currency=to_currency,
			rate=rate,
			converted_amount=amount * rate,
			last_update=snapshot.fetched_at,
		)

	def clear_cache(self) -> None:
		self.cache.clear()

	def cache_stats(self) -> dict:
		return {'entries': len(self.cache), 'keys': self.cache.keys()}

	@staticmethod
	def _parse_amount(amount) -> float:
		if amount is None or isinstance(amount, bool):
			raise InvalidAmountError('amount must be greater than 0')

		try:
			value = float(amount)
		except (TypeError, ValueError, OverflowError) as e:
			raise InvalidAmountError('amount must be greater than 0') from e

		if not math.isfinite(value) or value <= 0:
			raise InvalidAmountError('amount must be greater than 0')
		return value
