"""Command line entry point.

Usage::

    python -m src.cli [-universal | -server | -client]

The first recognized profile token wins; without one the ``universal``
profile is used. Exit status is 0 when every target was created or already
present, 1 when at least one file could not be written and 2 on a fatal
error.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from src.profiles.registry import ScaffoldConfig, default_config, select_profile
from src.scaffolder.config import scaffold_log_level, scaffold_root_dir
from src.scaffolder.scaffold import run_scaffold
from src.scaffolder.types import ScaffoldFatalError

logger = logging.getLogger("src.cli")

EXIT_OK = 0
EXIT_PARTIAL = 1
EXIT_FATAL = 2


def main(
    argv: Sequence[str] | None = None,
    *,
    config: ScaffoldConfig | None = None,
    root: Path | None = None,
) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    cfg = config or default_config()
    base = root or scaffold_root_dir()

    profile = select_profile(args, cfg)
    try:
        report = run_scaffold(profile, config=cfg, root=base)
    except ScaffoldFatalError as exc:
        logger.error("Scaffolding aborted: %s", exc, exc_info=exc.__cause__)
        return EXIT_FATAL

    logger.info(
        "Profile '%s' done: %d created, %d skipped, %d failed",
        report.profile_id,
        len(report.created),
        len(report.skipped),
        len(report.failed),
    )
    return EXIT_OK if report.ok else EXIT_PARTIAL


def run() -> None:
    logging.basicConfig(
        level=scaffold_log_level(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    sys.exit(main())


if __name__ == "__main__":  # pragma: no cover - manual execution
    run()
