"""
Git operations module for git-semver.

Reads tags and commit history with GitPython and resolves them into the
facts the versioning module works on.
"""

from .repository import (
    all_of,
    describe,
    find_root,
    glob_matcher,
    new_from_repo,
    read_tags,
    semver_matcher,
)

__all__ = [
    "all_of",
    "describe",
    "find_root",
    "glob_matcher",
    "new_from_repo",
    "read_tags",
    "semver_matcher",
]
