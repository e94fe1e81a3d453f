"""
Format engine rendering a Version according to a format spec.

A format spec is built from the tokens ``x`` (major), ``.y`` (minor),
``.z`` (patch), ``-p`` (pre-release) and ``+m`` (metadata), in that order.
Every token but ``x`` is optional, e.g. ``x.y.z-p+m`` or ``x.y``.
"""

import re
from typing import TYPE_CHECKING

from gitsemver.constants import (
    FULL_FORMAT,
    NO_META_FORMAT,
    NO_MINOR_FORMAT,
    NO_PATCH_FORMAT,
    NO_PRE_FORMAT,
)

from .exceptions import InvalidFormatError

if TYPE_CHECKING:
    from .version import Version

FORMAT_PATTERN = re.compile(
    r"(?P<major>x)(?P<minor>\.y)?(?P<patch>\.z)?(?P<pre>-p)?(?P<meta>\+m)?"
)

# Group name and the separator placed in front of its value
_COMPONENTS = (
    ("major", "."),
    ("minor", "."),
    ("patch", "."),
    ("pre", "-"),
    ("meta", "+"),
)

PREDEFINED_FORMATS = {
    "full": FULL_FORMAT,
    "no-meta": NO_META_FORMAT,
    "no-pre": NO_PRE_FORMAT,
    "no-patch": NO_PATCH_FORMAT,
    "no-minor": NO_MINOR_FORMAT,
}


def _append(rendered: str, value: str, separator: str) -> str:
    if value and rendered:
        return rendered + separator + value
    return rendered + value


def _component_value(version: "Version", name: str) -> str:
    if name == "major":
        return str(version.major)
    if name == "minor":
        return str(version.minor)
    if name == "patch":
        return str(version.patch)
    if name == "pre":
        return version.effective_pre_release
    return version.meta


def validate_format(format_spec: str) -> re.Match:
    """
    Match a format spec against the format grammar.

    Raises:
        InvalidFormatError: If the spec has unknown or reordered tokens
    """
    match = FORMAT_PATTERN.fullmatch(format_spec)
    if match is None:
        raise InvalidFormatError(format_spec)
    return match


def format_version(version: "Version", format_spec: str) -> str:
    """
    Render a version with the components selected by the format spec.

    Separators are only inserted between two non-empty values, so an empty
    pre-release or metadata vanishes together with its separator.

    Args:
        version: Version to render
        format_spec: Format spec, e.g. "x.y.z-p+m"

    Returns:
        The prefix followed by the rendered components

    Raises:
        InvalidFormatError: If the format spec is invalid
    """
    match = validate_format(format_spec)

    rendered = ""
    for name, separator in _COMPONENTS:
        if match.group(name) is None:
            continue
        rendered = _append(rendered, _component_value(version, name), separator)

    return version.prefix + rendered
