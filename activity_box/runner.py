"""Fetch, format, publish."""

from __future__ import annotations

import argparse
import asyncio
import logging
from dataclasses import dataclass
from typing import Optional, Sequence

import httpx

from activity_box.config import ConfigError, Settings
from activity_box.logging_config import configure_logging
from activity_box.services.formatter import format_events
from activity_box.services.gist import GistStore, SnippetStore
from activity_box.services.github import (
    HTTP_TIMEOUT_SECONDS,
    ActivitySource,
    GitHubActivitySource,
)

logger = logging.getLogger(__name__)

FETCH_FAILED = "Action failed with error"
PUBLISH_FAILED = "Failed to update Gist"
SUCCESS_MESSAGE = "Gist updated successfully!"


@dataclass
class RunResult:
    ok: bool
    message: str
    content: str = ""

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1


def _failure(prefix: str, exc: BaseException, content: str = "") -> RunResult:
    message = f"{prefix}: {exc}"
    logger.error(message)
    return RunResult(ok=False, message=message, content=content)


async def run(
    settings: Settings,
    source: ActivitySource,
    store: Optional[SnippetStore],
) -> RunResult:
    """
    Run the job once.

    Every failure is turned into a failed :class:`RunResult`; the publish
    step is never attempted after a failed fetch. Passing ``store=None``
    formats the content without publishing it.
    """
    try:
        events = await source.fetch(settings.username)
        content = format_events(events, settings.max_lines, settings.max_length)
    except Exception as exc:
        return _failure(FETCH_FAILED, exc)

    if store is None:
        logger.info("Dry run, Gist %s left untouched", settings.gist_id)
        return RunResult(ok=True, message="Dry run complete", content=content)

    try:
        await store.publish(settings.gist_id, content)
    except Exception as exc:
        return _failure(PUBLISH_FAILED, exc, content)

    logger.info(SUCCESS_MESSAGE)
    return RunResult(ok=True, message=SUCCESS_MESSAGE, content=content)


async def run_from_settings(settings: Settings, *, dry_run: bool = False) -> RunResult:
    async with httpx.AsyncClient(timeout=HTTP_TIMEOUT_SECONDS) as client:
        source = GitHubActivitySource(
            settings.github_token,
            base_url=settings.api_base_url,
            client=client,
        )
        store = None
        if not dry_run:
            store = GistStore(
                settings.gist_token,
                filename=settings.gist_filename,
                base_url=settings.api_base_url,
                client=client,
            )
        return await run(settings, source, store)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="activity-box",
        description="Write your latest GitHub activity into a pinned gist.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="fetch and format the activity, print it, and skip the gist update",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = Settings.from_env()
    except ConfigError as exc:
        configure_logging()
        return _failure(FETCH_FAILED, exc).exit_code

    configure_logging(settings.log_level)
    result = asyncio.run(run_from_settings(settings, dry_run=args.dry_run))
    if args.dry_run and result.ok:
        print(result.content)
    return result.exit_code
