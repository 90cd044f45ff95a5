"""Domain errors."""


class InvalidArgumentError(ValueError):
    """Raised when an animator is constructed with unusable arguments."""
    pass
