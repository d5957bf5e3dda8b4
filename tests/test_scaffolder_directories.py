from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest

from src.scaffolder.directories import classify_mkdir_error, ensure_directory_path
from src.scaffolder.types import DirectoryResult, DirectoryStatus, ErrorKind


def test_creates_every_prefix_shallowest_first(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    made: list[str] = []
    real_mkdir = os.mkdir

    def _mkdir(path, *args, **kwargs):
        made.append(Path(path).relative_to(tmp_path).as_posix())
        return real_mkdir(path, *args, **kwargs)

    monkeypatch.setattr(os, "mkdir", _mkdir)
    out = ensure_directory_path("a/b/c", root=tmp_path)

    assert made == ["a", "a/b", "a/b/c"]
    assert out == [
        DirectoryResult("a", DirectoryStatus.CREATED),
        DirectoryResult("a/b", DirectoryStatus.CREATED),
        DirectoryResult("a/b/c", DirectoryStatus.CREATED),
    ]
    assert (tmp_path / "a" / "b" / "c").is_dir()


def test_existing_directories_are_not_errors(tmp_path: Path) -> None:
    (tmp_path / "a" / "b").mkdir(parents=True)
    out = ensure_directory_path("a/b", root=tmp_path)
    assert [r.status for r in out] == [DirectoryStatus.EXISTS, DirectoryStatus.EXISTS]

    again = ensure_directory_path("a/b", root=tmp_path)
    assert all(r.status is DirectoryStatus.EXISTS for r in again)
    assert all(r.error is None for r in again)


def test_partial_existing_chain(tmp_path: Path) -> None:
    (tmp_path / "src").mkdir()
    out = ensure_directory_path("src/server", root=tmp_path)
    assert out == [
        DirectoryResult("src", DirectoryStatus.EXISTS),
        DirectoryResult("src/server", DirectoryStatus.CREATED),
    ]


def test_failure_is_logged_and_remaining_prefixes_attempted(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    real_mkdir = os.mkdir
    attempted: list[str] = []

    def _mkdir(path, *args, **kwargs):
        rel = Path(path).relative_to(tmp_path).as_posix()
        attempted.append(rel)
        if rel == "a/b":
            raise PermissionError(13, "Permission denied", str(path))
        return real_mkdir(path, *args, **kwargs)

    monkeypatch.setattr(os, "mkdir", _mkdir)
    with caplog.at_level(logging.ERROR, logger="src.scaffolder.directories"):
        out = ensure_directory_path("a/b/c", root=tmp_path)

    assert attempted == ["a", "a/b", "a/b/c"]
    assert [r.status for r in out] == [
        DirectoryStatus.CREATED,
        DirectoryStatus.FAILED,
        DirectoryStatus.FAILED,
    ]
    assert "Permission denied" in (out[1].error or "")
    assert "Failed to create directory a/b" in caplog.text


def test_file_in_the_way_fails_without_raising(tmp_path: Path) -> None:
    (tmp_path / "a").write_text("not a dir")
    out = ensure_directory_path("a/b", root=tmp_path)
    assert out[0] == DirectoryResult("a", DirectoryStatus.EXISTS)
    assert out[1].status is DirectoryStatus.FAILED


def test_empty_directory_is_a_no_op(tmp_path: Path) -> None:
    assert ensure_directory_path("", root=tmp_path) == []


def test_classify_mkdir_error() -> None:
    assert classify_mkdir_error(FileExistsError()) is ErrorKind.RECOVERABLE
    assert classify_mkdir_error(PermissionError()) is ErrorKind.LOGGED
    assert classify_mkdir_error(NotADirectoryError()) is ErrorKind.LOGGED
