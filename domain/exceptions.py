class ValidationError(Exception):
    """Raised when a bootstrap plan is malformed."""
