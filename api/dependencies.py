import logging
import time

from application.services import ConversionService
from config.settings import get_settings
from infrastructure.cache.rate_cache import RateCache
from infrastructure.providers import ExchangeRateAPIProvider, RateProvider

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	rate_cache: RateCache | None = None
	provider: RateProvider | None = None
	conversion_service: ConversionService | None = None
	started_at: float = time.monotonic()


deps = AppDependencies()


def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = get_settings()

	deps.rate_cache = RateCache()
	deps.provider = ExchangeRateAPIProvider(base_url=settings.EXCHANGE_RATE_API_URL)
	deps.conversion_service = ConversionService(cache=deps.rate_cache, provider=deps.provider)
	deps.started_at = time.monotonic()
	logger.info('Dependencies initialized')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.provider:
		await deps.provider.close()
	if deps.rate_cache:
		deps.rate_cache.clear()

	logger.info('Cleanup complete')


def get_conversion_service() -> ConversionService:
	if deps.conversion_service is None:
		raise RuntimeError('Conversion service not initialized')
	return deps.conversion_service


def get_uptime() -> float:
	return time.monotonic() - deps.started_at
