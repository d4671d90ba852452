class ExtractionError(Exception):
    """Raised when passport extraction fails."""


class ServiceError(ExtractionError):
    """Raised when the remote extraction call fails."""


class ServiceNetworkError(ServiceError):
    """Raised when the provider cannot be reached or times out."""


class ServiceRateLimitError(ServiceError):
    """Raised when the provider rejects the call for exceeding its rate limit."""


class ServiceInputError(ServiceError):
    """Raised when the provider rejects the request, e.g. an unreadable image."""


class SchemaError(ExtractionError):
    """Raised when the provider reply does not match the passport schema."""
