"""
Versioning module for git-semver.

All version logic lives here: the git layer only collects tags and commits,
and the CLI only picks options. Nothing in this package touches a repository.

LAYERS:
=======

1. **Version model and parser** (version.py):
   - RepoHead: last tag, commits since that tag and the HEAD commit hash
   - Version: parsed components with the total order used everywhere
   - parse_from_head / parse_version: build a Version from a tag

2. **Format engine** (format.py):
   - format_version: render a Version from a spec such as ``x.y.z-p+m``

3. **Bump engine** (bump.py):
   - Target: dev, patch, minor or major
   - bump_to: compute the next version, never mutating the input

4. **Tag resolver** (tags.py):
   - compare_tags: decide between tags sharing a commit
   - resolve_head: nearest eligible tag and commit count from HEAD

5. **Exception hierarchy** (exceptions.py):
   - Every error carries the offending input
"""

from .bump import Target, bump_to
from .exceptions import (
    InvalidFormatError,
    InvalidNumericError,
    InvalidTargetError,
    InvalidVersionCoreError,
    NoHeadError,
    RepoNotFoundError,
    VersioningError,
    VersionParseError,
)
from .format import PREDEFINED_FORMATS, format_version
from .tags import Tag, build_tag_map, compare_tags, resolve_head
from .version import (
    RepoHead,
    Version,
    compare,
    is_version,
    parse_from_head,
    parse_version,
)

__all__ = [
    # Model and parser
    "RepoHead",
    "Version",
    "compare",
    "is_version",
    "parse_from_head",
    "parse_version",
    # Format engine
    "PREDEFINED_FORMATS",
    "format_version",
    # Bump engine
    "Target",
    "bump_to",
    # Tag resolver
    "Tag",
    "build_tag_map",
    "compare_tags",
    "resolve_head",
    # Exceptions
    "VersioningError",
    "RepoNotFoundError",
    "NoHeadError",
    "VersionParseError",
    "InvalidVersionCoreError",
    "InvalidNumericError",
    "InvalidFormatError",
    "InvalidTargetError",
]
