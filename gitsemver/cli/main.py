"""git-semver CLI"""

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

import click

from gitsemver import __version__
from gitsemver.config import load_config
from gitsemver.constants import (
    CONFIG_SECTION,
    DEFAULT_FORMAT,
    DEFAULT_PREFIX,
    DEFAULT_TARGET,
    FULL_FORMAT,
    NO_META_FORMAT,
    NO_MINOR_FORMAT,
    NO_PATCH_FORMAT,
    NO_PRE_FORMAT,
)
from gitsemver.git import find_root, new_from_repo
from gitsemver.versioning import Target, Version, VersioningError, bump_to

from gitsemver.cli.utils.logging import logger
from .debug import add_debug_option


@dataclass
class FormatOptions:
    """Format related command line options."""

    format: str = ""
    exclude_hash: bool = False
    exclude_meta: bool = False
    exclude_pre_release: bool = False
    exclude_patch: bool = False
    exclude_minor: bool = False
    guard: bool = False
    default_format: str = DEFAULT_FORMAT


def select_format(options: FormatOptions, version: Version) -> str:
    """
    Pick the format spec for the given options.

    An explicit format wins over the shorthand exclusion flags, and the
    shortest shorthand wins over longer ones. With guard enabled and a
    version carrying a pre-release, shorthands that would drop the
    pre-release are ignored.
    """
    if options.guard and version.effective_pre_release:
        if NO_META_FORMAT in options.format:
            return options.format
        if options.exclude_hash or options.exclude_meta:
            return NO_META_FORMAT
        return FULL_FORMAT
    if options.format:
        return options.format
    if options.exclude_minor:
        return NO_MINOR_FORMAT
    if options.exclude_patch:
        return NO_PATCH_FORMAT
    if options.exclude_pre_release:
        return NO_PRE_FORMAT
    if options.exclude_hash or options.exclude_meta:
        return NO_META_FORMAT
    return options.default_format


def _first(*values):
    """Return the first value that is not None."""
    for value in values:
        if value is not None:
            return value
    return None


@click.command(
    name="git-semver", context_settings={"help_option_names": ["-h", "--help"]}
)
@click.version_option(__version__, prog_name="git-semver")
@click.argument("repo", required=False, type=click.Path(file_okay=False))
@click.option(
    "--prefix",
    type=str,
    default=None,
    envvar="GIT_SEMVER_PREFIX",
    help="Prefix recognized in tags and printed (default: v is recognized).",
)
@click.option(
    "--no-prefix", "exclude_prefix", is_flag=True, help="Exclude the prefix."
)
@click.option(
    "--format",
    "format_spec",
    type=str,
    default=None,
    help="Format string (e.g.: x.y.z-p+m).",
)
@click.option(
    "--no-hash", "exclude_hash", is_flag=True, help="Exclude commit hash."
)
@click.option(
    "--no-meta", "exclude_meta", is_flag=True, help="Exclude build metadata."
)
@click.option("--set-meta", type=str, default=None, help="Set build metadata.")
@click.option(
    "--no-pre",
    "exclude_pre_release",
    is_flag=True,
    help="Exclude pre-release version.",
)
@click.option(
    "--no-patch", "exclude_patch", is_flag=True, help="Exclude patch version."
)
@click.option(
    "--no-minor", "exclude_minor", is_flag=True, help="Exclude minor version."
)
@click.option(
    "--guard",
    is_flag=True,
    help="Ignore shorthand options if version contains pre-release.",
)
@click.option(
    "--target",
    type=click.Choice([str(target) for target in Target]),
    default=None,
    envvar="GIT_SEMVER_TARGET",
    help=f"Version component to bump (default: {DEFAULT_TARGET}).",
)
@click.option(
    "--match",
    type=str,
    default=None,
    envvar="GIT_SEMVER_MATCH",
    help="Only consider tags matching the given glob pattern.",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Only consider tags that are valid semantic versions.",
)
@click.pass_context
def cli(
    ctx,
    repo: Optional[str],
    prefix: Optional[str],
    exclude_prefix: bool,
    format_spec: Optional[str],
    exclude_hash: bool,
    exclude_meta: bool,
    set_meta: Optional[str],
    exclude_pre_release: bool,
    exclude_patch: bool,
    exclude_minor: bool,
    guard: bool,
    target: Optional[str],
    match: Optional[str],
    strict: bool,
):
    """Print the semantic version of the HEAD commit of REPO.

    REPO defaults to the current directory. Commits after the last tag are
    reflected as a dev.<n> pre-release with the commit hash as metadata,
    e.g. 1.2.4-dev.3+fcf2c8fa.
    """
    repo_path = Path(repo) if repo else Path.cwd()
    config = load_config(find_root(repo_path) or repo_path)

    prefix = _first(prefix, config.get(CONFIG_SECTION, "prefix"), "")
    pattern = _first(match, config.get(CONFIG_SECTION, "match"), "")
    target_name = _first(target, config.get(CONFIG_SECTION, "target"), DEFAULT_TARGET)
    options = FormatOptions(
        format=format_spec or "",
        exclude_hash=exclude_hash,
        exclude_meta=exclude_meta,
        exclude_pre_release=exclude_pre_release,
        exclude_patch=exclude_patch,
        exclude_minor=exclude_minor,
        guard=guard or config.getboolean(CONFIG_SECTION, "guard"),
        # GIT_SEMVER_FORMAT only replaces the default format
        default_format=_first(
            os.environ.get("GIT_SEMVER_FORMAT") or None,
            config.get(CONFIG_SECTION, "format"),
            DEFAULT_FORMAT,
        ),
    )

    try:
        bump_target = Target.parse(target_name)
        version = new_from_repo(
            repo_path, prefix=prefix or DEFAULT_PREFIX, pattern=pattern, strict=strict
        )
        logger.debug(f"Parsed version {version!r}")

        version = bump_to(version, bump_target)
        if set_meta:
            version = replace(version, meta=set_meta)
        if prefix:
            version = replace(version, prefix=prefix)
        if exclude_prefix:
            version = replace(version, prefix="")

        output = version.format(select_format(options, version))
    except VersioningError as e:
        click.echo(str(e), err=True)
        ctx.exit(1)

    click.echo(output)


add_debug_option(cli)

if __name__ == "__main__":
    cli(obj={})
