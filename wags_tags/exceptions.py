"""Custom exceptions for Wags Tags."""


class TagManagerError(Exception):
    """Base class for errors that abort a tagging operation."""


class NoConfigurationError(TagManagerError):
    """Raised when a release is planned without an environment configuration."""

    def __init__(self, message: str = "No configuration found. Please run wags-tags --config first."):
        super().__init__(message)


class VersionParseError(TagManagerError, ValueError):
    """Raised when a version string is not three dot-separated integers."""

    def __init__(self, version: str):
        self.version = version
        super().__init__(f"Cannot parse version from '{version}'")


class TagPlanningError(TagManagerError):
    """Raised when the planner assembles a tag that fails its own grammar."""

    def __init__(self, tag: str, reason: str):
        self.tag = tag
        self.reason = reason
        super().__init__(f"Planned tag '{tag}' is invalid: {reason}")


class GitOperationError(TagManagerError):
    """Raised when a git command fails."""
