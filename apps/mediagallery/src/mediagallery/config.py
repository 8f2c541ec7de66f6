"""Media gallery configuration."""

import logging
import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from ghlist.client import DEFAULT_TIMEOUT, GitHubClient

logger = logging.getLogger(__name__)

ENV_PREFIX = "MEDIAGALLERY_"
ENV_FIELDS = ("owner", "repo", "path", "ref", "base_url", "timeout")


class GalleryConfig(BaseModel):
    """Where to list media from and how to reach GitHub."""

    owner: str = Field(min_length=1)
    repo: str = Field(min_length=1)
    path: str = ""
    ref: str | None = None
    base_url: str = GitHubClient.BASE_URL
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)

    @field_validator("path")
    @classmethod
    def _strip_path(cls, value: str) -> str:
        return value.strip("/")

    @field_validator("base_url")
    @classmethod
    def _strip_base_url(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("ref")
    @classmethod
    def _empty_ref(cls, value: str | None) -> str | None:
        return value or None


def env_var(name: str) -> str:
    """Environment variable backing a config field."""
    return f"{ENV_PREFIX}{name.upper()}"


def load_config(env_file: str | Path | None = None, **overrides: Any) -> GalleryConfig:
    """
    Build config from a .env file, the environment and explicit overrides.

    Explicit overrides (non-None) win over environment values.

    Raises:
        pydantic.ValidationError: Missing owner/repo or invalid values
    """
    loaded = load_dotenv(env_file) if env_file else load_dotenv()
    logger.debug("dotenv loaded: %s", loaded)

    values: dict[str, Any] = {}
    for name in ENV_FIELDS:
        value = os.environ.get(env_var(name))
        if value is not None:
            values[name] = value
    values.update({k: v for k, v in overrides.items() if v is not None})
    return GalleryConfig(**values)
