"""GitHub contents listing client."""

from .client import GitHubClient
from .errors import DecodeError, FetchError, FetchErrorKind, NetworkError, StatusError
from .models import EntryKind, RepoEntry

__all__ = [
    "GitHubClient",
    "RepoEntry",
    "EntryKind",
    "FetchError",
    "FetchErrorKind",
    "NetworkError",
    "StatusError",
    "DecodeError",
]
