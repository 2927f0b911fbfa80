class CurrencyException(Exception):
    pass


class ValidationError(CurrencyException):
    """Caller-fixable input problem. Message is safe to show to clients."""


class InvalidAmountError(ValidationError):
    pass


class InvalidCurrencyError(ValidationError):
    pass


class RateNotFoundError(ValidationError):
    pass


class ProviderError(CurrencyException):
    pass
