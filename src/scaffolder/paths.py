from __future__ import annotations

import posixpath
from pathlib import Path


def normalize_target_path(path: str) -> str:
    """Normalize a relative, slash-delimited target path like 'src/app/README.md'."""
    raw = (path or "").strip().replace("\\", "/")
    if not raw:
        raise ValueError("empty path")
    if "\x00" in raw:
        raise ValueError("invalid path")
    if raw.startswith("/"):
        raise ValueError(f"absolute path not allowed: {path!r}")

    # normpath collapses "..", so check the original segments.
    if ".." in raw.split("/"):
        raise ValueError(f"path traversal not allowed: {path!r}")

    norm = posixpath.normpath(raw)
    if norm == "." or raw.endswith("/"):
        raise ValueError(f"not a file path: {path!r}")
    return norm


def directory_sequence(directory: str) -> list[str]:
    """Expand a directory path into every prefix, shallowest first.

    "src/server" -> ["src", "src/server"]
    "src/server/config" -> ["src", "src/server", "src/server/config"]
    """
    d = posixpath.normpath(directory) if directory else "."
    if d == ".":
        return []

    out: list[str] = []
    previous = ""
    for part in d.split("/"):
        current = f"{previous}/{part}" if previous else part
        out.append(current)
        previous = current
    return out


def resolve_under(root: Path, rel: str) -> Path:
    return root.joinpath(*rel.split("/"))
