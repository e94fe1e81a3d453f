"""
Version model and parser.

A Version is reconstructed from the facts a repository yields about its
HEAD (last tag, commits since that tag and the commit hash) and is never
modified in place: bumping or overriding a field produces a new value.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from gitsemver.constants import DEFAULT_PREFIX, FULL_FORMAT, HASH_LENGTH

from .exceptions import (
    InvalidNumericError,
    InvalidVersionCoreError,
    VersionParseError,
)
from .format import format_version


@dataclass(frozen=True)
class RepoHead:
    """Facts about the HEAD commit of a repository."""

    last_tag: str = ""
    commits_since_tag: int = 0
    commit_hash: str = ""

    def __post_init__(self):
        if self.commits_since_tag < 0:
            raise ValueError(
                f"commits_since_tag must be non-negative, got {self.commits_since_tag}"
            )


@dataclass(frozen=True)
class Version:
    """
    A semantic version derived from a tag.

    ``pre_release`` holds what the tag itself declared, while
    ``effective_pre_release`` also reflects the commits made since the tag.
    """

    major: int = 0
    minor: int = 0
    patch: int = 0
    pre_release: str = ""
    commits: int = 0
    meta: str = ""
    prefix: str = ""

    @property
    def effective_pre_release(self) -> str:
        """
        Pre-release as displayed.

        Equal to the parsed pre-release at a tagged commit; otherwise
        ``dev.<commits>`` is appended to it.
        """
        if self.commits == 0:
            return self.pre_release
        if not self.pre_release:
            return f"dev.{self.commits}"
        return f"{self.pre_release}.dev.{self.commits}"

    def format(self, format_spec: str) -> str:
        """Render the version, see format_version."""
        return format_version(self, format_spec)

    def __str__(self) -> str:
        return format_version(self, FULL_FORMAT)

    def __lt__(self, other) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) < 0

    def __le__(self, other) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) <= 0

    def __gt__(self, other) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) > 0

    def __ge__(self, other) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) >= 0


def _sort_key(version: Version) -> Tuple[int, int, int, int, str, str]:
    return (
        version.major,
        version.minor,
        version.patch,
        version.commits,
        version.meta,
        str(version),
    )


def compare(a: Version, b: Version) -> int:
    """
    Compare two versions.

    Versions are ordered by major, minor, patch, commits, metadata and
    finally by their full rendering.

    Returns:
        -1 if a < b
         0 if a == b
         1 if a > b
    """
    left, right = _sort_key(a), _sort_key(b)
    if left < right:
        return -1
    elif left > right:
        return 1
    else:
        return 0


def _split(tag: str, prefix: str) -> Tuple[str, str, str, Optional[str]]:
    """Split a tag into prefix, numeric core, pre-release and explicit metadata."""
    version_prefix = prefix if tag.startswith(prefix) else ""
    rest = tag[len(version_prefix) :]

    meta = None
    if "+" in rest:
        rest, _, meta = rest.partition("+")

    core, _, pre_release = rest.partition("-")
    return version_prefix, core, pre_release, meta


def _parse_component(name: str, value: str, core: str) -> int:
    if not (value.isascii() and value.isdigit()):
        raise InvalidNumericError(name, value, core)
    return int(value)


def parse_from_head(head: RepoHead, prefix: str = DEFAULT_PREFIX) -> Version:
    """
    Build a Version from the facts about a repository HEAD.

    An explicit ``+meta`` suffix on the tag is kept as metadata; without one,
    the abbreviated commit hash is used when HEAD is ahead of the tag.
    An empty tag (repository never tagged) yields 0.0.0.

    Args:
        head: Last tag, commits since the tag and the HEAD commit hash
        prefix: Prefix recognized and kept in front of the version, "v" if empty

    Returns:
        The parsed Version

    Raises:
        InvalidVersionCoreError: If the core does not have 3 components
        InvalidNumericError: If a component is not a non-negative integer
    """
    if not prefix:
        prefix = DEFAULT_PREFIX

    version_prefix, core, pre_release, meta = _split(head.last_tag, prefix)
    if meta is None:
        meta = head.commit_hash[:HASH_LENGTH] if head.commits_since_tag > 0 else ""

    if not core:
        return Version(
            pre_release=pre_release,
            commits=head.commits_since_tag,
            meta=meta,
            prefix=version_prefix,
        )

    parts = core.split(".")
    if len(parts) != 3:
        raise InvalidVersionCoreError(core)

    major, minor, patch = (
        _parse_component(name, value, core)
        for name, value in zip(("major", "minor", "patch"), parts)
    )

    return Version(
        major=major,
        minor=minor,
        patch=patch,
        pre_release=pre_release,
        commits=head.commits_since_tag,
        meta=meta,
        prefix=version_prefix,
    )


def parse_version(version_string: str, prefix: str = DEFAULT_PREFIX) -> Version:
    """
    Parse a literal version string such as "v1.2.3-rc.1+build".

    Raises:
        VersionParseError: If the version string is invalid
    """
    return parse_from_head(RepoHead(last_tag=version_string), prefix)


def is_version(version_string: str, prefix: str = DEFAULT_PREFIX) -> bool:
    """Check whether a string carries a valid X.Y.Z version core."""
    _, core, _, _ = _split(version_string, prefix or DEFAULT_PREFIX)
    if not core:
        return False
    try:
        parse_version(version_string, prefix)
    except VersionParseError:
        return False
    return True
