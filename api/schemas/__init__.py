from .requests import ConversionRequest
from .responses import (
	CacheStatsData,
	CacheStatsResponse,
	ConversionData,
	ConversionResponse,
	HealthResponse,
	MessageResponse,
	RatesData,
	RatesResponse,
	SupportedCurrenciesResponse,
)

__all__ = [
	'CacheStatsData',
	'CacheStatsResponse',
	'ConversionRequest',
	'ConversionData',
	'ConversionResponse',
	'HealthResponse',
	'MessageResponse',
	'RatesData',
	'RatesResponse',
	'SupportedCurrenciesResponse',
]
