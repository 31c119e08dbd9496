"""Error raised for malformed arguments at the resolution boundary."""


class InvalidArgumentError(ValueError):
    """Raised synchronously, before any I/O, when an argument is malformed."""
