from .conversion_service import PROVIDER_UNAVAILABLE_MESSAGE, ConversionService

__all__ = ['ConversionService', 'PROVIDER_UNAVAILABLE_MESSAGE']
