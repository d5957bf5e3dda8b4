from __future__ import annotations

import logging
import os
from pathlib import Path

from src.scaffolder.paths import directory_sequence, resolve_under
from src.scaffolder.types import DirectoryResult, DirectoryStatus, ErrorKind

logger = logging.getLogger(__name__)


def classify_mkdir_error(exc: OSError) -> ErrorKind:
    if isinstance(exc, FileExistsError):
        return ErrorKind.RECOVERABLE
    return ErrorKind.LOGGED


def ensure_directory_path(directory: str, *, root: Path) -> list[DirectoryResult]:
    """Create every missing directory along a relative path, shallowest first.

    Each prefix gets a single-level mkdir. A directory that already exists
    counts as success. Any other failure is logged and the remaining prefixes
    are still attempted, so this never raises for filesystem errors.
    """
    results: list[DirectoryResult] = []
    for prefix in directory_sequence(directory):
        try:
            os.mkdir(resolve_under(root, prefix))
        except OSError as exc:
            if classify_mkdir_error(exc) is ErrorKind.RECOVERABLE:
                results.append(DirectoryResult(prefix, DirectoryStatus.EXISTS))
                continue
            logger.error("Failed to create directory %s: %s", prefix, exc)
            results.append(DirectoryResult(prefix, DirectoryStatus.FAILED, str(exc)))
            continue
        logger.info("Directory %s created", prefix)
        results.append(DirectoryResult(prefix, DirectoryStatus.CREATED))
    return results
