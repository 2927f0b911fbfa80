from typing import Protocol

from domain.models.currency import RateSnapshot


class RateProvider(Protocol):
	"""Source of full rate tables for a base currency."""

	@property
	def name(self) -> str: ...

	async def fetch_rates(self, base_currency: str) -> RateSnapshot:
		"""Fetch the latest table for ``base_currency``. Raises ProviderError."""
		...

	async def close(self) -> None: ...
