class InvalidArgumentError(ValueError):
    """Raised when a bridge model is given an argument it cannot hold."""
