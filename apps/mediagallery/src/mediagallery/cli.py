"""CLI for the media gallery."""

import asyncio
import json
import logging
from typing import Sequence

import click
from dotenv import load_dotenv
from pydantic import ValidationError

from ghlist import FetchError

from .config import GalleryConfig, env_var
from .gallery import MediaGallery
from .models import MediaItem

logger = logging.getLogger(__name__)


def setup_logging(verbose: int) -> None:
    """Setup logging."""
    level = logging.DEBUG if verbose >= 2 else logging.INFO if verbose == 1 else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def echo_error(error: FetchError) -> None:
    click.echo(f"Error ({error.kind.value}): {error}", err=True)


# ============ Displays ============

class TextDisplay:
    """One line per item: TYPE  NAME  URL."""

    def show_items(self, items: Sequence[MediaItem]) -> None:
        if not items:
            click.echo("No media found")
            return
        width = max(len(item.name) for item in items)
        for item in items:
            click.echo(f"{item.media_type.value:<5}  {item.name:<{width}}  {item.url}")

    def show_error(self, error: FetchError) -> None:
        echo_error(error)


class JsonDisplay:
    """JSON array of items."""

    def show_items(self, items: Sequence[MediaItem]) -> None:
        click.echo(json.dumps([item.model_dump(mode="json") for item in items], indent=2))

    def show_error(self, error: FetchError) -> None:
        echo_error(error)


# ============ CLI Group ============

@click.group()
@click.option("--owner", envvar=env_var("owner"), required=True, help="Repository owner")
@click.option("--repo", envvar=env_var("repo"), required=True, help="Repository name")
@click.option("--path", envvar=env_var("path"), default="", help="Directory path (root if empty)")
@click.option("--ref", envvar=env_var("ref"), help="Branch/tag/commit")
@click.option("--base-url", envvar=env_var("base_url"), help="GitHub API base URL")
@click.option("--timeout", envvar=env_var("timeout"), type=float, help="Request timeout (seconds)")
@click.option("-v", "--verbose", count=True, help="Verbosity (-v, -vv)")
@click.pass_context
def cli(
    ctx: click.Context,
    owner: str,
    repo: str,
    path: str,
    ref: str | None,
    base_url: str | None,
    timeout: float | None,
    verbose: int,
) -> None:
    """List images and videos in a GitHub repository directory."""
    setup_logging(verbose)
    values = {"base_url": base_url, "timeout": timeout}
    try:
        config = GalleryConfig(
            owner=owner,
            repo=repo,
            path=path,
            ref=ref,
            **{k: v for k, v in values.items() if v is not None},
        )
    except ValidationError as e:
        raise click.UsageError(str(e)) from e
    ctx.ensure_object(dict)
    ctx.obj["gallery"] = MediaGallery(config)


# ============ Commands ============

@cli.command()
@click.option("--json", "as_json", is_flag=True, help="Output JSON")
@click.pass_context
def media(ctx, as_json):
    """List media files (.jpg, .png, .mp4)."""
    gallery = ctx.obj["gallery"]
    display = JsonDisplay() if as_json else TextDisplay()
    result = asyncio.run(gallery.show(display))
    if not result.ok:
        raise SystemExit(1)


@cli.command()
@click.pass_context
def entries(ctx):
    """List the raw directory entries."""
    gallery = ctx.obj["gallery"]
    try:
        listing = asyncio.run(gallery.fetch_entries())
    except FetchError as e:
        echo_error(e)
        raise SystemExit(1)

    if not listing:
        click.echo("Directory is empty")
        return
    for entry in listing:
        click.echo(f"{entry.kind.value:<9}  {entry.path}")


def main() -> None:
    load_dotenv()
    cli()


if __name__ == "__main__":
    main()
