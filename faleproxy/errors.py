from typing import Optional

from fastapi import status


class RelayError(Exception):
    """Base error for failures surfaced to the caller as ``{"error": message}``."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class MissingURLError(RelayError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self):
        super().__init__("URL is required")


class FetchError(RelayError):
    """Network, HTTP status, timeout or parse failure while relaying a URL."""

    def __init__(self, cause: str):
        super().__init__(f"Failed to fetch content: {cause}")
        self.cause = cause
