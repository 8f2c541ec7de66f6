"""Media gallery data models."""

from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, ConfigDict

from ghlist import FetchError


class MediaType(str, Enum):
    """How a media item is displayed."""

    IMAGE = "image"
    VIDEO = "video"


class MediaItem(BaseModel):
    """Classified, display-ready media file."""

    model_config = ConfigDict(frozen=True)

    name: str
    path: str
    url: str
    media_type: MediaType


@dataclass
class GalleryResult:
    """Outcome of one fetch-and-classify cycle: items or an error, never both."""

    items: list[MediaItem] = field(default_factory=list)
    error: FetchError | None = None
    entry_count: int = 0  # raw listing size, 0 on error

    @property
    def ok(self) -> bool:
        return self.error is None
