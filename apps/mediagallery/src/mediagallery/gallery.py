"""Fetch a repository directory and turn it into a media gallery."""

import asyncio
import logging
from typing import Any, Protocol, Sequence

from ghlist import FetchError, GitHubClient, RepoEntry

from .classifier import classify
from .config import GalleryConfig, load_config
from .models import GalleryResult, MediaItem

logger = logging.getLogger(__name__)


class DirectoryFetcher(Protocol):
    """Anything that can list a repository directory."""

    async def list_directory(
        self, owner: str, repo: str, path: str = "", ref: str | None = None
    ) -> list[RepoEntry]:
        ...


class MediaDisplay(Protocol):
    """Renders a gallery result."""

    def show_items(self, items: Sequence[MediaItem]) -> None:
        ...

    def show_error(self, error: FetchError) -> None:
        ...


class MediaGallery:
    """Media gallery for one repository path."""

    def __init__(self, config: GalleryConfig, fetcher: DirectoryFetcher | None = None):
        """
        Initialize gallery.

        Args:
            config: Repository location and client settings
            fetcher: Directory fetcher to use (a GitHubClient per load if None)
        """
        self.config = config
        self.fetcher = fetcher
        logger.debug(
            "Gallery initialized for %s/%s path=%s", config.owner, config.repo, config.path
        )

    @classmethod
    def from_env(cls, **overrides: Any) -> "MediaGallery":
        """Build a gallery from MEDIAGALLERY_* environment variables."""
        return cls(load_config(**overrides))

    async def fetch_entries(self) -> list[RepoEntry]:
        """Fetch the raw directory listing. Raises FetchError."""
        config = self.config
        if self.fetcher is not None:
            return await self.fetcher.list_directory(
                config.owner, config.repo, config.path, config.ref
            )
        async with GitHubClient(base_url=config.base_url, timeout=config.timeout) as client:
            return await client.list_directory(
                config.owner, config.repo, config.path, config.ref
            )

    async def load(self) -> GalleryResult:
        """Fetch and classify. Failures are returned, not raised."""
        try:
            entries = await self.fetch_entries()
        except FetchError as e:
            logger.error("Failed to list %s/%s: %s", self.config.owner, self.config.repo, e)
            return GalleryResult(error=e)

        items = classify(entries)
        logger.info("Found %d media items in %d entries", len(items), len(entries))
        return GalleryResult(items=items, entry_count=len(entries))

    def load_sync(self) -> GalleryResult:
        """Run :meth:`load` on a fresh event loop."""
        return asyncio.run(self.load())

    async def show(self, display: MediaDisplay) -> GalleryResult:
        """Load and hand the outcome to a display."""
        result = await self.load()
        if result.error is not None:
            display.show_error(result.error)
        else:
            display.show_items(result.items)
        return result
