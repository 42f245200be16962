from __future__ import annotations


class PlaylistApiError(Exception):
    """Base class for errors surfaced to callers of the playlist core.

    ``status_code`` is only consulted by the HTTP adapter.
    """

    status_code = 400

    def __init__(self, message: str, *, operation: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.operation = operation

    def __str__(self) -> str:
        if self.operation:
            return f"{self.operation}: {self.message}"
        return self.message


class NotFoundError(PlaylistApiError):
    status_code = 404


class AccessDeniedError(PlaylistApiError):
    status_code = 403


class InvariantViolation(PlaylistApiError):
    status_code = 400
