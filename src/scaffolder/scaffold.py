"""Create-if-absent scaffolding for profile target files.

Each target path is one unit of work: an exclusive create of the file, falling
back to creating its parent directories when they are missing. Existing files
are never truncated or overwritten.
"""

from __future__ import annotations

import asyncio
import logging
import posixpath
from typing import IO, TYPE_CHECKING

from src.scaffolder.config import scaffold_max_workers
from src.scaffolder.directories import ensure_directory_path
from src.scaffolder.paths import normalize_target_path, resolve_under
from src.scaffolder.types import (
    DirectoryResult,
    ErrorKind,
    FileOutcome,
    OutcomeKind,
    ScaffoldFatalError,
    ScaffoldReport,
)

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence
    from pathlib import Path

    from src.profiles.registry import Profile, ScaffoldConfig

logger = logging.getLogger(__name__)


def classify_open_error(exc: OSError) -> ErrorKind:
    if isinstance(exc, (FileExistsError, FileNotFoundError)):
        return ErrorKind.RECOVERABLE
    return ErrorKind.FATAL


def _open_exclusive(full: Path) -> IO[str]:
    # "x" fails if the file exists and if any parent directory is missing.
    return open(full, "x", encoding="utf-8", newline="")


def _write_created(
    fh: IO[str],
    rel: str,
    content: str,
    directories: tuple[DirectoryResult, ...] = (),
) -> FileOutcome:
    try:
        with fh:
            fh.write(content)
    except OSError as exc:
        logger.error("Failed to write %s: %s", rel, exc)
        return FileOutcome(rel, OutcomeKind.FAILED, str(exc), directories)
    logger.info("File %s created", rel)
    return FileOutcome(rel, OutcomeKind.CREATED, None, directories)


def _skipped(rel: str, directories: tuple[DirectoryResult, ...] = ()) -> FileOutcome:
    logger.info("Skipping file %s - already exists", rel)
    return FileOutcome(rel, OutcomeKind.SKIPPED, None, directories)


def ensure_file(path: str, *, config: ScaffoldConfig, root: Path) -> FileOutcome:
    """Make sure a single target file exists under root.

    Raises ScaffoldFatalError when the initial create fails for any reason
    other than the file existing or a parent directory missing.
    """
    rel = normalize_target_path(path)
    full = resolve_under(root, rel)
    content = config.content_for(rel)

    try:
        fh = _open_exclusive(full)
    except OSError as exc:
        if classify_open_error(exc) is ErrorKind.FATAL:
            raise ScaffoldFatalError(rel, str(exc)) from exc
        if isinstance(exc, FileExistsError):
            return _skipped(rel)
    else:
        return _write_created(fh, rel, content)

    # Missing ancestor: build the directory chain, then create the file.
    directories = tuple(ensure_directory_path(posixpath.dirname(rel), root=root))
    try:
        fh = _open_exclusive(full)
    except FileExistsError:
        # Created by someone else while the directories were being made.
        return _skipped(rel, directories)
    except OSError as exc:
        logger.error("Failed to create %s: %s", rel, exc)
        return FileOutcome(rel, OutcomeKind.FAILED, str(exc), directories)
    return _write_created(fh, rel, content, directories)


async def ensure_all(
    targets: Sequence[str],
    *,
    config: ScaffoldConfig,
    root: Path,
    max_workers: int | None = None,
) -> list[FileOutcome]:
    """Run ensure_file for every target concurrently and join on completion.

    Completion order across targets is not defined; the returned outcomes
    follow the order of targets. Targets are normalized and de-duplicated
    first, so there is one outcome per distinct path, which can be fewer
    than the number of targets passed in. If any target hits a fatal error,
    units that have not started yet are not run, and the first fatal error is
    raised once the running ones have settled.
    """
    paths = list(dict.fromkeys(normalize_target_path(t) for t in targets))
    limit = asyncio.Semaphore(max(1, max_workers or scaffold_max_workers()))
    aborted = asyncio.Event()

    async def _run_one(rel: str) -> FileOutcome | None:
        async with limit:
            if aborted.is_set():
                return None
            try:
                return await asyncio.to_thread(
                    ensure_file, rel, config=config, root=root
                )
            except ScaffoldFatalError:
                aborted.set()
                raise

    results = await asyncio.gather(
        *[_run_one(p) for p in paths], return_exceptions=True
    )

    for r in results:
        if isinstance(r, BaseException):
            raise r
    return [r for r in results if r is not None]


async def scaffold_profile(
    profile: Profile,
    *,
    config: ScaffoldConfig,
    root: Path,
    max_workers: int | None = None,
) -> ScaffoldReport:
    logger.info(
        "Scaffolding profile '%s' (%d file(s)) under %s",
        profile.profile_id,
        len(profile.files),
        root,
    )
    outcomes = await ensure_all(
        profile.files, config=config, root=root, max_workers=max_workers
    )
    report = ScaffoldReport(profile_id=profile.profile_id, outcomes=tuple(outcomes))
    if report.failed:
        logger.warning(
            "Failed to scaffold %d file(s): %s", len(report.failed), report.failed
        )
    return report


def run_scaffold(
    profile: Profile,
    *,
    config: ScaffoldConfig,
    root: Path,
    max_workers: int | None = None,
) -> ScaffoldReport:
    return asyncio.run(
        scaffold_profile(profile, config=config, root=root, max_workers=max_workers)
    )
