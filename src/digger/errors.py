class DiggerError(Exception):
    """Base error for map generation exceptions."""


class InvalidArguments(DiggerError, ValueError):
    """Raised when generation settings or command-line values are unusable."""


class OutOfBounds(DiggerError, IndexError):
    """Raised when a grid access falls outside [0, width) x [0, height)."""
