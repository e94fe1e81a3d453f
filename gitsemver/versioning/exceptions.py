"""
Exception classes for the versioning module.
"""


class VersioningError(Exception):
    """Base exception for all versioning-related errors."""

    pass


class RepoNotFoundError(VersioningError):
    """Raised when the repository path cannot be opened."""

    def __init__(self, path: str):
        self.path = path
        super().__init__("failed to open repo: repository does not exist")


class NoHeadError(VersioningError):
    """Raised when the repository has no commits."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"failed to get HEAD of {path}: repository has no commits")


class VersionParseError(VersioningError):
    """Base class for errors raised while parsing a version string."""

    def __init__(self, version_string: str, message: str):
        self.version_string = version_string
        super().__init__(message)


class InvalidVersionCoreError(VersionParseError):
    """Raised when the numeric core does not have exactly three components."""

    def __init__(self, version_string: str):
        super().__init__(
            version_string,
            f"git version tag must contain 3 components: X.Y.Z: Got {version_string}",
        )


class InvalidNumericError(VersionParseError):
    """Raised when a version component is not a non-negative integer."""

    def __init__(self, component: str, value: str, version_string: str):
        self.component = component
        self.value = value
        super().__init__(
            version_string,
            f"failed to parse {component} version: '{value}' is not a non-negative integer",
        )


class InvalidFormatError(VersioningError):
    """Raised when a format spec does not match the format grammar."""

    def __init__(self, format_spec: str):
        self.format_spec = format_spec
        super().__init__(f"invalid format: {format_spec}")


class InvalidTargetError(VersioningError):
    """Raised when a bump target name is unknown."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"parse error: unknown target '{value}'")
