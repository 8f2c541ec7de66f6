"""GitHub contents API client."""

import logging
from types import TracebackType
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter, ValidationError

from .errors import DecodeError, NetworkError, StatusError
from .models import RepoEntry

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0  # seconds

_ENTRIES = TypeAdapter(list[RepoEntry])


def _error_detail(response: httpx.Response) -> str | None:
    """Pull GitHub's `message` field out of an error body, if any."""
    try:
        data = response.json()
    except ValueError:
        return None
    if isinstance(data, dict) and isinstance(data.get("message"), str):
        return data["message"]
    return None


class GitHubClient:
    """Read-only GitHub contents client.

    The underlying ``httpx.AsyncClient`` can be injected. An injected client
    is left open; one created here is closed by :meth:`aclose`.
    """

    BASE_URL = "https://api.github.com"

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize GitHub client.

        Args:
            base_url: Custom base URL (defaults to GitHub API)
            timeout: Request timeout in seconds
            http_client: Pre-configured async HTTP client to use
        """
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.timeout = timeout
        self.headers = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": "mediagallery-github-client",
        }
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=timeout)
        logger.debug("GitHub client ready, base_url=%s", self.base_url)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    async def __aenter__(self) -> "GitHubClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    def contents_url(self, owner: str, repo: str, path: str = "") -> str:
        """Build the contents endpoint URL for a repository path."""
        url = f"{self.base_url}/repos/{quote(owner, safe='')}/{quote(repo, safe='')}/contents"
        path = path.strip("/")
        if path:
            url = f"{url}/{quote(path, safe='/')}"
        return url

    async def _get(self, url: str, **kwargs: Any) -> httpx.Response:
        """Single GET; undecodable bodies become DecodeError, other failures NetworkError."""
        logger.debug("Request: GET %s", url)
        try:
            response = await self._http.get(
                url, headers=self.headers, timeout=self.timeout, **kwargs
            )
        except httpx.DecodingError as e:
            # Content-Encoding did not match the body
            logger.error("Undecodable response: GET %s: %s", url, e)
            raise DecodeError(f"Response body could not be decoded: {e}", url) from e
        except httpx.RequestError as e:
            logger.error("Request failed: GET %s: %s", url, e)
            raise NetworkError(f"Request failed: {e}", url) from e
        logger.debug("Response: GET %s (status=%d)", url, response.status_code)
        return response

    async def list_directory(
        self, owner: str, repo: str, path: str = "", ref: str | None = None
    ) -> list[RepoEntry]:
        """
        List a repository directory.

        Args:
            owner: Repository owner
            repo: Repository name
            path: Path in repository (empty for root)
            ref: Branch/tag/commit (default branch when None)

        Returns:
            Entries in the order GitHub returned them

        Raises:
            NetworkError: No response was obtained
            StatusError: Non-2xx response
            DecodeError: Body is not a JSON array of entries
        """
        if not owner or not repo:
            raise ValueError("owner and repo must be non-empty")

        url = self.contents_url(owner, repo, path)
        params = {"ref": ref} if ref else {}
        logger.info("Fetching contents: %s/%s path=%s ref=%s", owner, repo, path, ref)
        response = await self._get(url, params=params)

        if not response.is_success:
            detail = _error_detail(response)
            logger.warning("Listing failed: %s (status=%d)", url, response.status_code)
            raise StatusError(response.status_code, url, detail)

        try:
            data = response.json()
        except ValueError as e:
            raise DecodeError(f"Response is not JSON: {e}", url) from e

        if not isinstance(data, list):
            # GitHub answers with a single object when path names a file
            raise DecodeError(
                f"Expected a JSON array, got {type(data).__name__}", url
            )

        try:
            entries = _ENTRIES.validate_python(data)
        except ValidationError as e:
            raise DecodeError(f"Unexpected listing shape: {e}", url) from e

        logger.debug("Directory listing: %d items", len(entries))
        return entries
