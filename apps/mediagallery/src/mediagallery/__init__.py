"""GitHub repository media gallery."""

from .classifier import MEDIA_SUFFIXES, classify, media_type_for
from .config import GalleryConfig, load_config
from .gallery import DirectoryFetcher, MediaDisplay, MediaGallery
from .models import GalleryResult, MediaItem, MediaType

__all__ = [
    "MediaGallery",
    "MediaItem",
    "MediaType",
    "GalleryResult",
    "GalleryConfig",
    "DirectoryFetcher",
    "MediaDisplay",
    "MEDIA_SUFFIXES",
    "classify",
    "media_type_for",
    "load_config",
]
