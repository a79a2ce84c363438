"""
Release Planner

Decides which prior tag a release builds on and assembles the new
immutable/mutable tag pair. Everything here is pure apart from the
latest-tag lookup, which is injected by the caller.
"""

import logging
from typing import Callable, Optional, Union

from .config import ALLOWED_ENVS, MAIN_BRANCHES, PRODUCTION_MUTABLE_TAG, SEED_VERSION
from .environment import EnvironmentConfig
from .exceptions import NoConfigurationError, TagPlanningError
from .models import ChannelKind, Environment, IncrementKind, PreReleaseKind, ReleaseChannel, VersionInfo
from .validation import validate_tag
from .versioning import increment_version

logger = logging.getLogger(__name__)

# Looks up the latest tag for an environment name, or for production when None
TagLookup = Callable[[Optional[str]], Optional[str]]


def resolve_environment(branch: str, env_config: EnvironmentConfig) -> Optional[Environment]:
    """Find the environment bound to a branch."""
    return env_config.get_environment_by_branch(branch)


def classify_branch(branch: str, env_config: EnvironmentConfig) -> ReleaseChannel:
    """Classify a branch against the environment mapping."""
    environment = resolve_environment(branch, env_config)
    if environment is not None:
        kind = ChannelKind.PRODUCTION if environment.is_production else ChannelKind.ENVIRONMENT
        return ReleaseChannel(kind=kind, branch=branch, environment=environment)
    if branch in MAIN_BRANCHES:
        return ReleaseChannel(kind=ChannelKind.MAIN, branch=branch)
    return ReleaseChannel(kind=ChannelKind.BRANCH, branch=branch)


def _find_base_tag(channel: ReleaseChannel, latest_tag: TagLookup) -> Optional[str]:
    """Latest tag in the channel's scope, falling back to the latest production tag."""
    scope = channel.tag_scope
    found = latest_tag(scope)
    if found is None and scope is not None:
        logger.debug(f"No tags found for environment '{scope}', falling back to production tags")
        found = latest_tag(None)
    return found


def _tag_suffix(channel: ReleaseChannel) -> Optional[str]:
    if channel.kind == ChannelKind.ENVIRONMENT:
        return channel.environment.name
    if channel.kind == ChannelKind.BRANCH:
        return channel.branch
    return None


def _mutable_tag(channel: ReleaseChannel) -> Optional[str]:
    if channel.kind == ChannelKind.PRODUCTION:
        return PRODUCTION_MUTABLE_TAG
    if channel.kind == ChannelKind.ENVIRONMENT:
        return channel.environment.name
    return None


def _is_grammar_governed(suffix: Optional[str]) -> bool:
    """Whether a tag with this suffix is expressible in the tag grammar."""
    return suffix is None or suffix in ALLOWED_ENVS


def assemble_tag(version: str, suffix: Optional[str] = None, pre_release: Optional[str] = None) -> str:
    """Build v<version>[-<suffix>][-<pre_release>]."""
    tag = f"v{version}"
    if suffix:
        tag = f"{tag}-{suffix}"
    if pre_release:
        tag = f"{tag}-{pre_release}"
    return tag


def plan_release(
    branch: str,
    env_config: Optional[EnvironmentConfig],
    latest_tag: TagLookup,
    increment: Union[IncrementKind, str] = IncrementKind.PATCH,
    pre_release: Optional[Union[PreReleaseKind, str]] = None,
) -> VersionInfo:
    """
    Plan the tags for a release from `branch`.

    Args:
        branch: Branch being released
        env_config: Environment mapping
        latest_tag: Lookup returning the latest tag for an environment name,
            or the latest production tag when called with None
        increment: Version part to bump
        pre_release: Optional pre-release qualifier

    Returns:
        VersionInfo with the prior tag (or "none") and the new tag pair

    Raises:
        NoConfigurationError: If env_config is None
        TagPlanningError: If a grammar-governed tag fails validation
    """
    if env_config is None:
        raise NoConfigurationError()

    increment = IncrementKind(increment)
    pre_release = PreReleaseKind(pre_release).value if pre_release else None

    channel = classify_branch(branch, env_config)
    logger.debug(f"Branch '{branch}' classified as {channel.kind.value}")

    base_tag = _find_base_tag(channel, latest_tag)
    if base_tag is None:
        logger.debug(f"No existing tags found, starting at {SEED_VERSION}")
        new_version = SEED_VERSION
    else:
        logger.debug(f"Incrementing {increment.value} version of {base_tag}")
        new_version = increment_version(base_tag, increment)

    suffix = _tag_suffix(channel)
    immutable_tag = assemble_tag(new_version, suffix, pre_release)

    if _is_grammar_governed(suffix):
        result = validate_tag(immutable_tag)
        if not result.is_valid:
            raise TagPlanningError(immutable_tag, result.error)
    else:
        logger.debug(f"Suffix '{suffix}' is outside the tag grammar, skipping validation of {immutable_tag}")

    environment = channel.environment
    return VersionInfo(
        current_version=base_tag or "none",
        immutable_tag=immutable_tag,
        mutable_tag=_mutable_tag(channel),
        branch=environment.branch if environment else branch,
        environment=environment.name if environment else None,
    )


def determine_new_version(
    io_layer,
    env_config: Optional[EnvironmentConfig],
    increment: Union[IncrementKind, str] = IncrementKind.PATCH,
    pre_release: Optional[Union[PreReleaseKind, str]] = None,
) -> VersionInfo:
    """Plan a release for the repository's current branch.

    Args:
        io_layer: IOLayer providing the current branch and tag lookups
        env_config: Environment mapping, None if not configured yet
    """
    if env_config is None:
        raise NoConfigurationError()
    branch = io_layer.get_current_branch()
    return plan_release(branch, env_config, io_layer.get_latest_tag, increment, pre_release)
