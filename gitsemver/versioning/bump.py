"""
Bump engine computing the next version from a current one.
"""

from dataclasses import replace
from enum import Enum

from gitsemver.constants import TARGET_DEV, TARGET_MAJOR, TARGET_MINOR, TARGET_PATCH

from .exceptions import InvalidTargetError
from .version import Version


class Target(str, Enum):
    """Version component a bump is aimed at."""

    DEV = TARGET_DEV
    PATCH = TARGET_PATCH
    MINOR = TARGET_MINOR
    MAJOR = TARGET_MAJOR

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str) -> "Target":
        """
        Get the target for its name ("dev", "patch", "minor" or "major").

        Raises:
            InvalidTargetError: If the name is unknown
        """
        try:
            return cls(value)
        except ValueError as e:
            raise InvalidTargetError(value) from e


def bump_to(version: Version, target: Target) -> Version:
    """
    Return the version that follows ``version`` for the given target.

    DEV only increments the patch level of an untagged HEAD whose tag carried
    no pre-release; PATCH, MINOR and MAJOR produce a release version without
    commits, pre-release or metadata. The input version is left untouched.

    Raises:
        InvalidTargetError: If target is not a known target name
    """
    target = Target.parse(str(target))

    if target is Target.DEV:
        if version.commits > 0 and not version.pre_release:
            return replace(version, patch=version.patch + 1)
        return version

    if target is Target.PATCH:
        return replace(
            version, patch=version.patch + 1, commits=0, pre_release="", meta=""
        )
    if target is Target.MINOR:
        return replace(
            version,
            minor=version.minor + 1,
            patch=0,
            commits=0,
            pre_release="",
            meta="",
        )
    return replace(
        version,
        major=version.major + 1,
        minor=0,
        patch=0,
        commits=0,
        pre_release="",
        meta="",
    )
