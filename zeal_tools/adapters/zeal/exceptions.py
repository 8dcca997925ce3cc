"""Zeal adapter exceptions.

Custom exception hierarchy for Zeal API errors. Raised inside the client only;
callers receive a ZealResponse.
"""


class ZealAPIError(Exception):
    """Base exception for Zeal adapter."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ZealAuthError(ZealAPIError):
    """Invalid or missing API token, or insufficient permissions (401/403)."""

    pass


class ZealNotFoundError(ZealAPIError):
    """Company, worker or resource not found (404 response)."""

    pass


class ZealRateLimitError(ZealAPIError):
    """Rate limit exceeded (429 response)."""

    pass


class ZealValidationError(ZealAPIError):
    """Request rejected as invalid (400/422 response)."""

    pass
