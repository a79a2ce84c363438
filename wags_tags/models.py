"""Data models shared by the validator, the planner and the executor."""

from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any
from enum import Enum


class IncrementKind(Enum):
    """Which part of the version triple a release bumps."""
    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"


class PreReleaseKind(Enum):
    """Pre-release qualifiers accepted by the tag grammar."""
    ALPHA = "alpha"
    BETA = "beta"
    RC = "rc"


class TagErrorCode(Enum):
    """Reasons a tag string can be rejected."""
    INVALID_FORMAT = "invalid_format"
    LEADING_ZERO = "leading_zero"
    TOO_LARGE = "too_large"
    ZERO_VERSION = "zero_version"
    INVALID_ENVIRONMENT = "invalid_environment"
    PROD_SUFFIX_FORBIDDEN = "prod_suffix_forbidden"


class ChannelKind(Enum):
    """How the current branch relates to the environment mapping."""
    PRODUCTION = "production"    # Mapped to a production environment
    ENVIRONMENT = "environment"  # Mapped to a non-production environment
    MAIN = "main"                # Unmapped main/master branch
    BRANCH = "branch"            # Any other unmapped branch


@dataclass(frozen=True)
class Environment:
    """A named deployment channel bound to one branch."""
    name: str
    branch: str
    is_production: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Environment":
        return cls(
            name=data["name"],
            branch=data["branch"],
            is_production=data["isProduction"],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "branch": self.branch, "isProduction": self.is_production}


@dataclass(frozen=True, order=True)
class SemanticVersion:
    """A major.minor.patch triple."""
    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


@dataclass(frozen=True)
class ReleaseChannel:
    """Classification of a branch, derived once and dispatched on by the planner."""
    kind: ChannelKind
    branch: str
    environment: Optional[Environment] = None

    @property
    def tag_scope(self) -> Optional[str]:
        """Environment name used to scope the latest-tag lookup, None for unscoped."""
        if self.kind == ChannelKind.ENVIRONMENT:
            return self.environment.name
        return None


@dataclass
class TagFields:
    """Structured fields of a valid tag."""
    immutable_tag: str
    mutable_tag: str
    version_only: str
    env: Optional[str] = None
    pre_release: Optional[str] = None
    is_prod: bool = True
    is_prerelease: bool = False
    is_prod_prerelease: bool = True


@dataclass
class ValidationResult:
    """Outcome of validating a tag. Errors are reported, never raised."""
    is_valid: bool
    data: Optional[TagFields] = None
    error: Optional[str] = None
    code: Optional[TagErrorCode] = None

    @classmethod
    def failure(cls, code: TagErrorCode, error: str) -> "ValidationResult":
        return cls(is_valid=False, error=error, code=code)


@dataclass
class VersionInfo:
    """The tag pair proposed for a release."""
    current_version: str
    immutable_tag: str
    mutable_tag: Optional[str]
    branch: str
    environment: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "currentVersion": self.current_version,
            "immutableTag": self.immutable_tag,
            "mutableTag": self.mutable_tag,
            "branch": self.branch,
        }
        if self.environment:
            data["environment"] = self.environment
        return data


@dataclass
class ExecutionResult:
    """Result of applying a release's tags."""
    success: bool
    tags_created: List[str] = field(default_factory=list)
    tags_pushed: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    dry_run: bool = False
