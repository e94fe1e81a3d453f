"""
Tests for the Version model and parser.

All tests in this file are marked as 'short' since they don't require
external dependencies, containers, or network I/O.
"""

import itertools

import pytest

from gitsemver.versioning.exceptions import (
    InvalidNumericError,
    InvalidVersionCoreError,
    VersionParseError,
)
from gitsemver.versioning.version import (
    RepoHead,
    Version,
    compare,
    is_version,
    parse_from_head,
    parse_version,
)


@pytest.mark.short
class TestParseFromHead:
    """Test building versions from repository facts."""

    def test_plain_tag(self):
        """Test a tag at HEAD without prefix or suffixes."""
        v = parse_from_head(RepoHead(last_tag="1.2.3"))
        assert v == Version(major=1, minor=2, patch=3)

    @pytest.mark.parametrize(
        "head,expected,prefix",
        [
            (
                RepoHead("1.2.3", 4, "fcf2c8fa9e1b"),
                Version(major=1, minor=2, patch=3, commits=4, meta="fcf2c8fa"),
                "",
            ),
            (RepoHead(), Version(), ""),
            (
                RepoHead("1.2.3-rc.1"),
                Version(major=1, minor=2, patch=3, pre_release="rc.1"),
                "",
            ),
            (
                RepoHead("1.2.3-rc.1", 2, "d92f0b2a"),
                Version(
                    major=1, minor=2, patch=3, pre_release="rc.1", commits=2, meta="d92f0b2a"
                ),
                "",
            ),
            (RepoHead("v3.2.1"), Version(major=3, minor=2, patch=1, prefix="v"), "v"),
            (
                RepoHead("ver3.2.1"),
                Version(major=3, minor=2, patch=1, prefix="ver"),
                "ver",
            ),
            (
                RepoHead("3.2.1-liftoff.alpha.1", 3, "fcf2c8fa"),
                Version(
                    major=3,
                    minor=2,
                    patch=1,
                    pre_release="liftoff.alpha.1",
                    commits=3,
                    meta="fcf2c8fa",
                ),
                "",
            ),
            (
                RepoHead("3.5.0-liftoff-alpha.1"),
                Version(major=3, minor=5, patch=0, pre_release="liftoff-alpha.1"),
                "",
            ),
            (
                RepoHead("3.2.1+special"),
                Version(major=3, minor=2, patch=1, meta="special"),
                "",
            ),
            (
                RepoHead("3.2.1-rc.2+special"),
                Version(major=3, minor=2, patch=1, pre_release="rc.2", meta="special"),
                "",
            ),
            (
                RepoHead("3.2.1-rc.2+special", 3, "d92f0b2a"),
                Version(
                    major=3,
                    minor=2,
                    patch=1,
                    pre_release="rc.2",
                    commits=3,
                    meta="special",
                ),
                "",
            ),
        ],
    )
    def test_parse(self, head, expected, prefix):
        """Test parsing the supported tag shapes."""
        assert parse_from_head(head, prefix) == expected

    def test_never_tagged(self):
        """Test a repository without tags yields 0.0.0 with dev commits."""
        v = parse_from_head(RepoHead("", 5, "0123456789abcdef"))
        assert (v.major, v.minor, v.patch) == (0, 0, 0)
        assert v.commits == 5
        assert v.meta == "01234567"
        assert str(v) == "0.0.0-dev.5+01234567"

    def test_default_prefix_is_recognized(self):
        """Test that "v" is recognized when no prefix is given."""
        v = parse_from_head(RepoHead("v1.0.0"), "")
        assert v.prefix == "v"
        assert v.major == 1

    def test_custom_prefix_replaces_default(self):
        """Test that a custom prefix is the only one recognized."""
        with pytest.raises(InvalidNumericError):
            parse_from_head(RepoHead("v1.0.0"), "release-")

    def test_meta_split_on_first_plus(self):
        """Test that metadata keeps any further plus signs."""
        v = parse_version("1.2.3+build+42")
        assert v.meta == "build+42"

    def test_explicit_meta_wins_over_hash(self):
        """Test that the tag's metadata is kept when HEAD is ahead of it."""
        v = parse_from_head(RepoHead("1.0.0+special", 2, "abcdef0123"))
        assert v.meta == "special"
        assert v.commits == 2

    def test_negative_commit_count_rejected(self):
        """Test that RepoHead refuses a negative commit count."""
        with pytest.raises(ValueError):
            RepoHead("1.0.0", -1, "abc")


@pytest.mark.short
class TestParseErrors:
    """Test the errors raised for invalid tags."""

    @pytest.mark.parametrize("tag", ["1.2", "1.2.3.4", "1", "1..2.3"])
    def test_invalid_core(self, tag):
        """Test that cores without exactly 3 components are rejected."""
        with pytest.raises(InvalidVersionCoreError) as exc_info:
            parse_version(tag)
        assert exc_info.value.version_string == tag

    @pytest.mark.parametrize(
        "tag,component,value",
        [
            ("1.2.a", "patch", "a"),
            ("1.a.3", "minor", "a"),
            ("a.2.3", "major", "a"),
            ("1.2.", "patch", ""),
            ("1.2.3a", "patch", "3a"),
            ("1.².3", "minor", "²"),
        ],
    )
    def test_invalid_numeric(self, tag, component, value):
        """Test that the failing component is named."""
        with pytest.raises(InvalidNumericError) as exc_info:
            parse_version(tag)
        assert exc_info.value.component == component
        assert exc_info.value.value == value
        assert component in str(exc_info.value)

    def test_errors_share_base_class(self):
        """Test that parse errors can be caught together."""
        with pytest.raises(VersionParseError):
            parse_version("foo")

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("1.2.3", True),
            ("v1.2.3-rc.1+abc", True),
            ("v", False),
            ("latest", False),
            ("1.2", False),
        ],
    )
    def test_is_version(self, text, expected):
        """Test the version syntax check used for tag filtering."""
        assert is_version(text) is expected


@pytest.mark.short
class TestVersion:
    """Test the Version class."""

    @pytest.mark.parametrize(
        "version,expected",
        [
            (
                Version(major=1, minor=2, patch=3, commits=10, meta="fcf2c8f"),
                "1.2.3-dev.10+fcf2c8f",
            ),
            (Version(major=0, minor=3, patch=1), "0.3.1"),
            (Version(major=0, minor=3, patch=1, prefix="v"), "v0.3.1"),
            (Version(major=1, minor=3, patch=0, pre_release="rc.3"), "1.3.0-rc.3"),
            (
                Version(major=2, minor=5, patch=0, pre_release="rc.3", commits=3),
                "2.5.0-rc.3.dev.3",
            ),
        ],
    )
    def test_str(self, version, expected):
        """Test the full string representation."""
        assert str(version) == expected

    def test_effective_pre_release(self):
        """Test that the displayed pre-release reflects the commits."""
        assert Version(pre_release="rc.1").effective_pre_release == "rc.1"
        assert Version(commits=2).effective_pre_release == "dev.2"
        assert (
            Version(pre_release="rc.1", commits=2).effective_pre_release
            == "rc.1.dev.2"
        )
        assert Version().effective_pre_release == ""

    def test_stored_pre_release_is_raw(self):
        """Test that parsing does not store the dev suffix."""
        v = parse_from_head(RepoHead("1.0.0-rc.1", 3, "abcdef012345"))
        assert v.pre_release == "rc.1"
        assert v.effective_pre_release == "rc.1.dev.3"

    def test_immutable(self):
        """Test that versions cannot be modified in place."""
        v = Version(major=1)
        with pytest.raises(AttributeError):
            v.major = 2

    def test_hash(self):
        """Test that versions can be used in sets and as dict keys."""
        v1 = Version(major=1, minor=2, patch=3)
        v2 = Version(major=1, minor=2, patch=3)
        assert len({v1, v2}) == 1

    @pytest.mark.parametrize(
        "tag",
        ["1.2.3", "v0.0.1", "10.20.30", "v1.2.3-rc.1", "1.2.3+build.5", "v2.0.0-a-b+c"],
    )
    def test_round_trip(self, tag):
        """Test that rendering a parsed tag yields the tag again."""
        v = parse_version(tag)
        assert str(v) == tag
        assert parse_version(str(v)) == v


@pytest.mark.short
class TestCompare:
    """Test the total order of versions."""

    def test_compare_components(self):
        """Test ordering by major, minor and patch."""
        v = Version(major=1, minor=2, patch=3)
        assert compare(v, Version(major=1, minor=3, patch=0)) == -1
        assert compare(v, Version(major=1, minor=0, patch=0)) == 1
        assert compare(v, Version(major=1, minor=2, patch=3)) == 0
        assert compare(v, Version(major=0, minor=9, patch=9)) == 1

    def test_compare_meta(self):
        """Test that metadata is compared lexicographically."""
        v = Version(major=1, minor=2, patch=3, meta="dev.2")
        assert compare(v, Version(major=1, minor=2, patch=3, meta="dev.1")) == 1
        assert compare(v, Version(major=1, minor=2, patch=3, meta="dev.5")) == -1
        assert compare(v, Version(major=1, minor=2, patch=3, meta="dev.2")) == 0

    def test_compare_commits_before_meta(self):
        """Test that commits since the tag take precedence over metadata."""
        a = Version(major=1, commits=2, meta="aaaa")
        b = Version(major=1, commits=1, meta="zzzz")
        assert compare(a, b) == 1

    def test_compare_rendering_as_last_resort(self):
        """Test that the rendered string breaks remaining ties."""
        a = Version(major=1, pre_release="rc.1")
        b = Version(major=1, pre_release="rc.2")
        assert compare(a, b) == -1
        assert compare(b, a) == 1

    def test_operators(self):
        """Test rich comparison operators."""
        v1 = parse_version("1.0.0")
        v2 = parse_version("1.0.1")
        assert v1 < v2
        assert v1 <= v1
        assert v2 > v1
        assert v2 >= v2
        assert sorted([v2, v1]) == [v1, v2]

    def test_total_and_transitive(self):
        """Test that exactly one relation holds and ordering is transitive."""
        versions = [
            Version(major=major, minor=minor, patch=patch, commits=commits, meta=meta)
            for major, minor, patch, commits, meta in itertools.product(
                (0, 1), (0, 2), (1,), (0, 3), ("", "abc")
            )
        ] + [Version(major=1, pre_release="rc.1"), Version(major=1, prefix="v")]

        for a, b in itertools.product(versions, repeat=2):
            assert compare(a, b) == -compare(b, a)
            assert (compare(a, b) == 0) == (a == b)

        for a, b, c in itertools.product(versions, repeat=3):
            if compare(a, b) <= 0 and compare(b, c) <= 0:
                assert compare(a, c) <= 0
