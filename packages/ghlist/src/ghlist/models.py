"""GitHub contents listing models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class EntryKind(str, Enum):
    """Kind of item in a contents listing."""

    FILE = "file"
    DIRECTORY = "dir"
    SYMLINK = "symlink"
    SUBMODULE = "submodule"


class RepoEntry(BaseModel):
    """One item of a directory listing (file or directory)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(min_length=1)
    path: str
    kind: EntryKind = Field(alias="type")
    download_url: str | None = None  # null for directories

    @property
    def is_file(self) -> bool:
        return self.kind is EntryKind.FILE
