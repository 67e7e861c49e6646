"""Exceptions signalling a corrupted ranger model."""


class InvariantViolationError(RuntimeError):
    """Raised when the ranger model is corrupted or a caller breaks its contract."""

    pass
