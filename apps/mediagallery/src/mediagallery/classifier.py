"""Classify listing entries into media items."""

import logging
from typing import Iterable

from ghlist import RepoEntry

from .models import MediaItem, MediaType

logger = logging.getLogger(__name__)

# Literal, case-sensitive suffixes: "PHOTO.JPG" is not media.
MEDIA_SUFFIXES: dict[str, MediaType] = {
    ".jpg": MediaType.IMAGE,
    ".png": MediaType.IMAGE,
    ".mp4": MediaType.VIDEO,
}


def media_type_for(name: str) -> MediaType | None:
    """Return the media type for a file name, or None if unrecognized."""
    for suffix, media_type in MEDIA_SUFFIXES.items():
        if name.endswith(suffix):
            return media_type
    return None


def classify(entries: Iterable[RepoEntry]) -> list[MediaItem]:
    """
    Keep file entries with a media suffix and a download URL.

    Order of the input is preserved. Unmatched entries are dropped silently.
    """
    items: list[MediaItem] = []
    skipped = 0
    for entry in entries:
        if not entry.is_file:
            skipped += 1
            continue
        media_type = media_type_for(entry.name)
        if media_type is None or not entry.download_url:
            skipped += 1
            continue
        items.append(
            MediaItem(
                name=entry.name,
                path=entry.path,
                url=entry.download_url,
                media_type=media_type,
            )
        )
    logger.debug("Classified %d media items, skipped %d entries", len(items), skipped)
    return items
