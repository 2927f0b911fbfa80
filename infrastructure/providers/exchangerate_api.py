from datetime import UTC, date, datetime

import httpx

from domain.exceptions.currency import ProviderError
from domain.models.currency import PROVIDER_TIMEOUT_SECONDS, RateSnapshot


class ExchangeRateAPIProvider:
	BASE_URL = 'https://api.exchangerate-api.com/v4/latest'

	def __init__(
		self,
		base_url: str | None = None,
		client: httpx.AsyncClient | None = None,
		timeout: float = PROVIDER_TIMEOUT_SECONDS,
	):
		self.base_url = (base_url or self.BASE_URL).rstrip('/')
		self.timeout = timeout
		self._client = client or httpx.AsyncClient(timeout=timeout)

	@property
	def name(self) -> str:
		return 'exchangerate-api'

	async def _request(self, base_currency: str) -> dict:
		url = f'{self.base_url}/{base_currency}'

		try:
			response = await self._client.get(url)
			response.raise_for_status()
			data = response.json()

			if not isinstance(data, dict) or not isinstance(data.get('rates'), dict):
				raise ProviderError('ExchangeRate-API response has no rates table')

			return data

		except httpx.HTTPStatusError as e:
			raise ProviderError(
				f'ExchangeRate-API HTTP error {e.response.status_code}: {e.response.text[:200]}'
			) from e
		except httpx.RequestError as e:
			raise ProviderError(f'ExchangeRate-API request failed: {e.__class__.__name__}') from e
		except ProviderError:
			raise
		except Exception as e:
			raise ProviderError(f'ExchangeRate-API response parsing error: {str(e)}') from e

	async def fetch_rates(self, base_currency: str) -> RateSnapshot:
		base_currency = base_currency.upper()
		data = await self._request(base_currency)

		rates = {}
		for code, value in data['rates'].items():
			if isinstance(value, bool) or not isinstance(value, int | float):
				continue
			rates[str(code).upper()] = float(value)

		try:
			fetched_at = date.fromisoformat(data['date']) if data.get('date') else _today()
		except (TypeError, ValueError) as e:
			raise ProviderError(f'ExchangeRate-API returned invalid date: {data["date"]!r}') from e

		return RateSnapshot(
			base=str(data.get('base') or base_currency).upper(),
			rates=rates,
			fetched_at=fetched_at,
		)

	async def close(self) -> None:
		await self._client.aclose()


def _today() -> date:
	return datetime.now(UTC).date()
