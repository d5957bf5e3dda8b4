from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class OutcomeKind(Enum):
    CREATED = "created"
    SKIPPED = "skipped"
    FAILED = "failed"


class DirectoryStatus(Enum):
    CREATED = "created"
    EXISTS = "exists"
    FAILED = "failed"


class ErrorKind(Enum):
    # Absorbed within the path's own handling (exists, missing parent dir).
    RECOVERABLE = "recoverable"
    # Reported and recorded, processing continues.
    LOGGED = "logged"
    # Aborts the whole run.
    FATAL = "fatal"


class ScaffoldFatalError(RuntimeError):
    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


@dataclass(frozen=True)
class DirectoryResult:
    path: str
    status: DirectoryStatus
    error: str | None = None


@dataclass(frozen=True)
class FileOutcome:
    path: str
    kind: OutcomeKind
    error: str | None = None
    directories: tuple[DirectoryResult, ...] = ()


@dataclass(frozen=True)
class ScaffoldReport:
    profile_id: str
    outcomes: tuple[FileOutcome, ...] = field(default_factory=tuple)

    def _paths(self, kind: OutcomeKind) -> list[str]:
        return [o.path for o in self.outcomes if o.kind is kind]

    @property
    def created(self) -> list[str]:
        return self._paths(OutcomeKind.CREATED)

    @property
    def skipped(self) -> list[str]:
        return self._paths(OutcomeKind.SKIPPED)

    @property
    def failed(self) -> list[str]:
        return self._paths(OutcomeKind.FAILED)

    @property
    def ok(self) -> bool:
        return not self.failed
