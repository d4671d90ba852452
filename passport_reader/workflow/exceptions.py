class PreconditionError(Exception):
    """Raised when extraction is requested without a ready image."""
