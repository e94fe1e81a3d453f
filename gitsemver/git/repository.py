"""
Repository inspection with GitPython.

Collects the tags and the commit history of a repository and hands them to
the tag resolver, which turns them into a RepoHead.
"""

import fnmatch
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Union

from git import Repo
from git.exc import BadName, BadObject, InvalidGitRepositoryError, NoSuchPathError

from gitsemver.constants import DEFAULT_PREFIX
from gitsemver.versioning.exceptions import NoHeadError, RepoNotFoundError
from gitsemver.versioning.tags import Tag, TagMatcher, resolve_head
from gitsemver.versioning.version import (
    RepoHead,
    Version,
    is_version,
    parse_from_head,
)

logger = logging.getLogger(__name__)


def glob_matcher(pattern: str) -> TagMatcher:
    """
    Match tag names against a shell-style glob pattern.

    An empty pattern matches every tag.
    """
    if not pattern:
        return lambda name: True
    return lambda name: fnmatch.fnmatchcase(name, pattern)


def semver_matcher(prefix: str = DEFAULT_PREFIX) -> TagMatcher:
    """Match tag names that parse as a version."""
    return lambda name: is_version(name, prefix)


def all_of(*predicates: TagMatcher) -> TagMatcher:
    """Match tag names accepted by every predicate."""
    return lambda name: all(predicate(name) for predicate in predicates)


def _utc(timestamp: int) -> datetime:
    return datetime.fromtimestamp(timestamp, tz=timezone.utc)


def read_tags(repo: Repo) -> List[Tag]:
    """
    Read all tags of a repository.

    Tags that cannot be peeled to a commit are skipped.

    Args:
        repo: Git repository object

    Returns:
        List of tags with their commit and timestamp
    """
    tags = []
    for ref in repo.tags:
        try:
            commit = ref.commit
        except (ValueError, BadName, BadObject) as e:
            logger.debug(f"Skipping tag '{ref.name}': {e}")
            continue

        tag_object = ref.tag
        if tag_object is not None:
            timestamp = _utc(tag_object.tagged_date)
        else:
            timestamp = _utc(commit.committed_date)

        tags.append(Tag(name=ref.name, timestamp=timestamp, commit=commit.hexsha))

    return tags


def find_root(path: Union[str, Path]) -> Optional[Path]:
    """
    Find the working tree root of the repository containing path.

    Returns:
        The root directory, or None if path is not inside a working tree
    """
    try:
        repo = Repo(path, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError):
        return None

    with repo:
        if repo.working_tree_dir is None:
            return None
        return Path(repo.working_tree_dir)


def describe(
    path: Union[str, Path],
    match: Optional[TagMatcher] = None,
    prefix: str = DEFAULT_PREFIX,
) -> RepoHead:
    """
    Describe the HEAD commit of a repository.

    Args:
        path: Path to the repository or to a directory inside it
        match: Predicate restricting the tags taken into account
        prefix: Prefix recognized when comparing tag names as versions

    Returns:
        RepoHead with the last tag, the commits since that tag and HEAD's hash

    Raises:
        RepoNotFoundError: If no repository can be opened at path
        NoHeadError: If the repository has no commits
    """
    try:
        repo = Repo(path, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError) as e:
        raise RepoNotFoundError(str(path)) from e

    with repo:
        if not repo.head.is_valid():
            raise NoHeadError(str(path))

        head = repo.head.commit
        tags = read_tags(repo)
        logger.debug(f"Found {len(tags)} tags in {repo.working_dir or path}")

        commits = (commit.hexsha for commit in repo.iter_commits(head, date_order=True))
        return resolve_head(head.hexsha, commits, tags, match=match, prefix=prefix)


def new_from_repo(
    path: Union[str, Path],
    prefix: str = DEFAULT_PREFIX,
    pattern: str = "",
    strict: bool = False,
) -> Version:
    """
    Calculate the version of the HEAD commit of the repository at path.

    If HEAD is not tagged the version carries a ``dev.<n>`` pre-release and
    the abbreviated commit hash as metadata, e.g. 1.2.3-dev.3+fcf2c8fa.

    Args:
        path: Path to the repository
        prefix: Prefix recognized in tag names, "v" if empty
        pattern: Glob pattern limiting the tags taken into account
        strict: Only take tags into account that parse as versions

    Raises:
        RepoNotFoundError: If no repository can be opened at path
        NoHeadError: If the repository has no commits
        VersionParseError: If the resolved tag is not a valid version
    """
    prefix = prefix or DEFAULT_PREFIX
    match = glob_matcher(pattern)
    if strict:
        match = all_of(match, semver_matcher(prefix))

    head = describe(path, match=match, prefix=prefix)
    logger.debug(
        f"HEAD {head.commit_hash[:8]}: tag '{head.last_tag}', "
        f"{head.commits_since_tag} commits since"
    )
    return parse_from_head(head, prefix)
