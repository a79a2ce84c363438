"""
Tag Validation Module

Pure functions for parsing and validating release tags.
This module contains no side effects - only tag analysis logic.

Grammar: v<major>.<minor>.<patch>[-<env>][-<prerelease>]
"""

import re
from typing import Iterable, Optional

from .config import (
    ALLOWED_ENVS,
    MAX_VERSION_COMPONENT,
    PRERELEASE_TYPES,
    PRODUCTION_ENV,
    PRODUCTION_MUTABLE_TAG,
)
from .models import TagErrorCode, TagFields, ValidationResult

TAG_PATTERN = re.compile(
    r"^v(?P<version>(?P<major>[0-9]+)\.(?P<minor>[0-9]+)\.(?P<patch>[0-9]+))"
    rf"(?:-(?P<env>{'|'.join(ALLOWED_ENVS)}))?"
    rf"(?:-(?P<pre>{'|'.join(PRERELEASE_TYPES)}))?\Z"
)

ERROR_MESSAGES = {
    TagErrorCode.INVALID_FORMAT: "Invalid tag format!",
    TagErrorCode.LEADING_ZERO: "Version numbers cannot have leading zeros",
    TagErrorCode.TOO_LARGE: f"Version numbers cannot be larger than {MAX_VERSION_COMPONENT}",
    TagErrorCode.ZERO_VERSION: "Version cannot be 0.0.0 - at least one number must be greater than 0",
    TagErrorCode.INVALID_ENVIRONMENT: "Invalid environment!",
    TagErrorCode.PROD_SUFFIX_FORBIDDEN: "Production tags cannot use -prod suffix",
}


def _fail(code: TagErrorCode) -> ValidationResult:
    return ValidationResult.failure(code, ERROR_MESSAGES[code])


def validate_tag(tag: Optional[str]) -> ValidationResult:
    """
    Validate a tag against the release grammar and extract its fields.

    Rules are checked in order and the first failure wins: overall format,
    leading zeros, upper bound, all-zero version, forbidden -prod suffix.

    Args:
        tag: Candidate tag, e.g. "v1.2.3-dev-rc"

    Returns:
        ValidationResult with TagFields on success, error and code otherwise
    """
    match = TAG_PATTERN.match(tag) if tag else None
    if not match:
        return _fail(TagErrorCode.INVALID_FORMAT)

    parts = [match.group("major"), match.group("minor"), match.group("patch")]
    if any(str(int(part)) != part for part in parts):
        return _fail(TagErrorCode.LEADING_ZERO)

    numbers = [int(part) for part in parts]
    if any(number > MAX_VERSION_COMPONENT for number in numbers):
        return _fail(TagErrorCode.TOO_LARGE)

    if all(number == 0 for number in numbers):
        return _fail(TagErrorCode.ZERO_VERSION)

    env = match.group("env")
    if env == PRODUCTION_ENV:
        return _fail(TagErrorCode.PROD_SUFFIX_FORBIDDEN)

    pre_release = match.group("pre")
    is_prod = env is None

    return ValidationResult(
        is_valid=True,
        data=TagFields(
            immutable_tag=tag,
            mutable_tag=PRODUCTION_MUTABLE_TAG if is_prod else env,
            version_only=match.group("version"),
            env=env,
            pre_release=pre_release,
            is_prod=is_prod,
            is_prerelease=pre_release is not None,
            # Bare version tags count as production pre-releases
            is_prod_prerelease=is_prod,
        ),
    )


def validate_mutable_tag(tag: Optional[str], environment_names: Iterable[str] = ()) -> ValidationResult:
    """
    Check a floating tag name entered by the user.

    An empty value means "no mutable tag". Otherwise it must be "latest",
    one of the grammar's environment suffixes or a configured environment.

    Args:
        tag: Candidate mutable tag
        environment_names: Names from the environment configuration

    Returns:
        ValidationResult (data is always None)
    """
    if not tag:
        return ValidationResult(is_valid=True)

    allowed = {PRODUCTION_MUTABLE_TAG, *environment_names}
    allowed.update(ALLOWED_ENVS)
    allowed.discard(PRODUCTION_ENV)
    if tag not in allowed:
        return _fail(TagErrorCode.INVALID_ENVIRONMENT)
    return ValidationResult(is_valid=True)
