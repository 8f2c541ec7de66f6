"""Errors raised while fetching a contents listing."""

from enum import Enum


class FetchErrorKind(str, Enum):
    """What went wrong during a fetch."""

    NETWORK = "network"
    STATUS = "status"
    DECODE = "decode"


class FetchError(Exception):
    """Base class for listing fetch failures."""

    kind: FetchErrorKind

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


class NetworkError(FetchError):
    """No response was obtained (connect failure, timeout, protocol error)."""

    kind = FetchErrorKind.NETWORK


class StatusError(FetchError):
    """The server answered with a non-success status code."""

    kind = FetchErrorKind.STATUS

    def __init__(
        self,
        status_code: int,
        url: str | None = None,
        detail: str | None = None,
    ):
        message = f"HTTP {status_code}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message, url)
        self.status_code = status_code
        self.detail = detail


class DecodeError(FetchError):
    """The response body did not have the expected shape."""

    kind = FetchErrorKind.DECODE
