from __future__ import annotations


class AppError(Exception):
    """Base application error."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(detail)


class ValidationError(AppError):
    pass


class TransportError(AppError):
    """A call to the producer failed or returned something unusable."""


class ProcessingError(AppError):
    pass
