from __future__ import annotations


class UpnotesClientError(Exception):
    """Base client error."""


class NetworkError(UpnotesClientError):
    """Transport/network layer error."""


class ApiError(UpnotesClientError):
    def __init__(self, status_code: int, message: str, details: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class NotFoundError(ApiError):
    """Requested release document is absent or could not be fetched."""
