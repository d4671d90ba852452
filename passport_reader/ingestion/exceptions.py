class IngestionError(Exception):
    """Raised when a selected file cannot be turned into an encoded image."""


class UnsupportedMediaTypeError(IngestionError):
    """Raised when the file does not declare an image media type."""


class ImageReadError(IngestionError):
    """Raised when the file content cannot be read."""
