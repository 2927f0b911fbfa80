from .base import RateProvider
from .exchangerate_api import ExchangeRateAPIProvider

__all__ = ['RateProvider', 'ExchangeRateAPIProvider']
