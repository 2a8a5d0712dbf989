class AggregatorError(Exception):
    """Base aggregator exception."""


class SourceRequestError(AggregatorError):
    """Raised when a source request failed and will not be retried."""


class SourceTemporaryError(SourceRequestError):
    """Raised when a source request can be retried."""


class RecordValidationError(AggregatorError):
    """Raised when a provider item is not a valid record."""


class ConfigurationError(AggregatorError):
    """Raised when aggregator settings are invalid."""
