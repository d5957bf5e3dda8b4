from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Literal

from src.scaffolder.paths import normalize_target_path

ProfileId = Literal["universal", "server", "client"]

DEFAULT_PROFILE_ID: ProfileId = "universal"

# Leading character stripped from invocation tokens, so "-server" selects "server".
PROFILE_MARKER = "-"


@dataclass(frozen=True)
class Profile:
    profile_id: str
    label: str
    files: tuple[str, ...]


@dataclass(frozen=True)
class ScaffoldConfig:
    """Immutable profile and content tables, built once at startup."""

    profiles: Mapping[str, Profile]
    content: Mapping[str, str] = field(default_factory=dict)
    default_profile_id: str = DEFAULT_PROFILE_ID

    def __post_init__(self) -> None:
        # Target paths and content keys share one normalized form, so lookups
        # by a normalized target always hit.
        profiles = {
            pid: Profile(
                profile_id=p.profile_id,
                label=p.label,
                files=tuple(dict.fromkeys(normalize_target_path(f) for f in p.files)),
            )
            for pid, p in self.profiles.items()
        }
        content = {normalize_target_path(k): str(v) for k, v in self.content.items()}
        if self.default_profile_id not in profiles:
            raise ValueError(f"unknown default profile: {self.default_profile_id!r}")
        object.__setattr__(self, "profiles", MappingProxyType(profiles))
        object.__setattr__(self, "content", MappingProxyType(content))

    @property
    def profile_ids(self) -> tuple[str, ...]:
        return tuple(self.profiles)

    @property
    def default_profile(self) -> Profile:
        return self.profiles[self.default_profile_id]

    def content_for(self, path: str) -> str:
        # Paths missing from the table are created empty.
        return self.content.get(path, "")


_DEFAULT_PROFILES: tuple[Profile, ...] = (
    Profile(
        profile_id="universal",
        label="Client app and server",
        files=("src/app/README.md", "src/server/README.md"),
    ),
    Profile(
        profile_id="server",
        label="Server only",
        files=("src/server/README.md",),
    ),
    Profile(
        profile_id="client",
        label="Client app only",
        files=("src/app/README.md",),
    ),
)

_DEFAULT_CONTENT: dict[str, str] = {
    "src/app/README.md": "** Add clientside app content **",
    "src/server/README.md": "** Add serverside app content **",
}


def build_config(
    profiles: Iterable[Profile],
    content: Mapping[str, str] | None = None,
    *,
    default_profile_id: str = DEFAULT_PROFILE_ID,
) -> ScaffoldConfig:
    """Build a ScaffoldConfig from a sequence of profiles keyed by their ids.

    ScaffoldConfig normalizes target paths and content keys and de-duplicates
    files per profile (first occurrence keeps its position). Raises ValueError for unsafe paths,
    duplicate profile ids or an unknown default profile.
    """
    by_id: dict[str, Profile] = {}
    for p in profiles:
        pid = str(p.profile_id or "").strip()
        if not pid:
            raise ValueError("profile id must not be empty")
        if pid in by_id:
            raise ValueError(f"duplicate profile id: {pid!r}")
        by_id[pid] = Profile(profile_id=pid, label=p.label, files=tuple(p.files))

    return ScaffoldConfig(
        profiles=by_id,
        content=dict(content or {}),
        default_profile_id=default_profile_id,
    )


def default_config() -> ScaffoldConfig:
    return build_config(_DEFAULT_PROFILES, _DEFAULT_CONTENT)


def parse_profile_id(raw: object, config: ScaffoldConfig) -> str | None:
    v = str(raw or "")
    if v.startswith(PROFILE_MARKER):
        v = v[len(PROFILE_MARKER) :]
    if v in config.profiles:
        return v
    return None


def select_profile(args: Sequence[str], config: ScaffoldConfig) -> Profile:
    """Return the profile named by the first recognized token in args.

    Tokens are scanned in order; falls back to the default profile when
    nothing matches.
    """
    for arg in args:
        pid = parse_profile_id(arg, config)
        if pid is not None:
            return config.profiles[pid]
    return config.default_profile
