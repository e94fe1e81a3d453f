"""
Tag resolution.

Picks the tag that identifies the version of HEAD: the nearest tagged commit
on the way back from HEAD, where competing tags on the same commit are
decided by timestamp first and by version precedence second.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Dict, Iterable, Optional

from gitsemver.constants import DEFAULT_PREFIX

from .exceptions import VersionParseError
from .version import RepoHead, Version, compare, parse_version

logger = logging.getLogger(__name__)

TagMatcher = Callable[[str], bool]


@dataclass(frozen=True)
class Tag:
    """
    A tag on a commit.

    ``timestamp`` is the tagger date of an annotated tag, or the committer
    date of the target commit for a lightweight tag.
    """

    name: str
    timestamp: datetime
    commit: str


def _tag_version(tag: Tag, prefix: str) -> Optional[Version]:
    try:
        return parse_version(tag.name, prefix)
    except VersionParseError:
        return None


def _compare_names(a: str, b: str) -> int:
    return (a > b) - (a < b)


def compare_tags(a: Tag, b: Tag, prefix: str = DEFAULT_PREFIX) -> int:
    """
    Decide between two tags competing for the same commit.

    The more recent tag wins. With equal timestamps both names are parsed as
    versions and the greater one wins; a name that does not parse loses.

    Returns:
        A positive number if ``a`` wins, a negative number if ``b`` wins and
        0 if the two tags are indistinguishable.
    """
    if a.timestamp != b.timestamp:
        return 1 if a.timestamp > b.timestamp else -1

    version_a = _tag_version(a, prefix)
    version_b = _tag_version(b, prefix)
    if version_a is None and version_b is None:
        return _compare_names(a.name, b.name)
    if version_a is None:
        return -1
    if version_b is None:
        return 1

    result = compare(version_a, version_b)
    if result == 0:
        result = _compare_names(a.name, b.name)
    return result


def build_tag_map(
    tags: Iterable[Tag],
    match: Optional[TagMatcher] = None,
    prefix: str = DEFAULT_PREFIX,
) -> Dict[str, Tag]:
    """
    Map each tagged commit hash to its winning tag.

    Args:
        tags: All tags of the repository
        match: Predicate on tag names; tags it rejects are ignored entirely
        prefix: Prefix recognized when comparing tag names as versions

    Returns:
        Dictionary of commit hash to Tag
    """
    winners: Dict[str, Tag] = {}
    for tag in tags:
        if match is not None and not match(tag.name):
            logger.debug(f"Ignoring tag '{tag.name}': does not match")
            continue

        current = winners.get(tag.commit)
        if current is None or compare_tags(tag, current, prefix) > 0:
            if current is not None:
                logger.debug(
                    f"Tag '{tag.name}' wins over '{current.name}' on {tag.commit[:8]}"
                )
            winners[tag.commit] = tag

    return winners


def resolve_head(
    head: str,
    commits: Iterable[str],
    tags: Iterable[Tag],
    match: Optional[TagMatcher] = None,
    prefix: str = DEFAULT_PREFIX,
) -> RepoHead:
    """
    Find the last tag reachable from HEAD and count the commits since.

    Args:
        head: Hash of the HEAD commit
        commits: Hashes of the commits reachable from HEAD, starting with HEAD,
            most recent committer time first
        tags: All tags of the repository
        match: Predicate on tag names restricting the eligible tags
        prefix: Prefix recognized when comparing tag names as versions

    Returns:
        RepoHead with an empty last tag if no eligible tag is reachable
    """
    tag_map = build_tag_map(tags, match=match, prefix=prefix)

    if head in tag_map:
        return RepoHead(last_tag=tag_map[head].name, commit_hash=head)

    count = 0
    for commit in commits:
        tag = tag_map.get(commit)
        if tag is not None:
            return RepoHead(
                last_tag=tag.name, commits_since_tag=count, commit_hash=head
            )
        count += 1

    logger.debug(f"No tag reachable from {head[:8]}, {count} commits in history")
    return RepoHead(commits_since_tag=count, commit_hash=head)
