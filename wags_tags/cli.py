#!/usr/bin/env python3

"""
Environment Tag Manager for Git Repositories

Creates an immutable release tag and moves a floating environment tag,
based on the branch the repository is on. All planning is done by pure
functions, all git and file access goes through the I/O layer.
"""

import argparse
import logging
import sys
from typing import List, Optional

import typer

from .config import PRERELEASE_TYPES, SKIP_CHOICE, WIZARD_ENVIRONMENTS
from .environment import EnvironmentConfig
from .exceptions import TagManagerError
from .git_operations import setup_repo
from .io_layer import IOLayer
from .message_generation import (
    format_repository_setup_help,
    format_tag_fields,
    format_tag_pair,
    format_validation_error,
    format_version_summary,
)
from .models import Environment, IncrementKind
from .plan_executor import execute_release
from .prompts import confirm, select, text
from .release_planner import determine_new_version
from .utils import setup_logging
from .validation import validate_mutable_tag, validate_tag

ACTION_GENERATED = "Use generated tags"
ACTION_CUSTOM = "Enter custom tags"
ACTION_CANCEL = "Cancel"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="wags-tags",
        description="Create environment-aware semantic version tags",
        allow_abbrev=False,
    )
    increment = parser.add_mutually_exclusive_group()
    increment.add_argument("-major", "--major", dest="increment", action="store_const",
                           const=IncrementKind.MAJOR, help="Bump the major version")
    increment.add_argument("-minor", "--minor", dest="increment", action="store_const",
                           const=IncrementKind.MINOR, help="Bump the minor version")
    parser.add_argument("-pr", "--pre-release", action="store_true",
                        help="Ask for a pre-release type")
    parser.add_argument("--pre-release-type", choices=PRERELEASE_TYPES,
                        help="Pre-release type to append without asking")
    parser.add_argument("-config", "--config", action="store_true",
                        help="Map branches to environments and exit")
    parser.add_argument("--validate", metavar="TAG", help="Validate a tag and exit")
    parser.add_argument("--dry-run", action="store_true", help="Show what would be done")
    parser.add_argument("-y", "--yes", action="store_true", help="Skip the final confirmation")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.set_defaults(increment=IncrementKind.PATCH)
    return parser.parse_args(argv)


def run_validate(tag: str) -> int:
    """Print the fields of a tag, or why it is invalid."""
    result = validate_tag(tag)
    if not result.is_valid:
        print(format_validation_error(result))
        return 1
    print(f"✅ {tag} is valid")
    for line in format_tag_fields(result.data):
        print(f"  {line}")
    return 0


def setup_config(io_layer: IOLayer) -> Optional[EnvironmentConfig]:
    """Ask which branch backs each environment and save the mapping."""
    branches = io_layer.list_branches()
    if not branches:
        print(format_repository_setup_help())
        return None

    choices = branches + [SKIP_CHOICE]
    environments = []
    for name, default_branch, is_production in WIZARD_ENVIRONMENTS:
        label = "production" if is_production else name
        branch = select(
            f"Select your {label} branch (or skip):",
            choices,
            default=default_branch if default_branch in branches else None,
        )
        if branch != SKIP_CHOICE:
            environments.append(Environment(name=name, branch=branch, is_production=is_production))

    env_config = EnvironmentConfig(environments=environments)
    errors = env_config.validate()
    if errors:
        for error in errors:
            print(f"Error: {error}")
        return None

    if io_layer.save_config(env_config):
        print("Configuration saved successfully!")
        print(f"Configured environments: {', '.join(env_config.environment_names())}")
    elif not io_layer.dry_run:
        print("Failed to save configuration")
        return None
    return env_config


def _check_custom_tag(tag: str) -> Optional[str]:
    result = validate_tag(tag)
    return None if result.is_valid else format_validation_error(result)


def _check_custom_mutable_tag(tag: str, environment_names: List[str]) -> Optional[str]:
    result = validate_mutable_tag(tag, environment_names)
    return None if result.is_valid else format_validation_error(result)


def create_release(io_layer: IOLayer, env_config: EnvironmentConfig, args: argparse.Namespace) -> int:
    """Plan, confirm and apply a release."""
    pre_release = args.pre_release_type
    if pre_release is None and args.pre_release:
        pre_release = select("Select pre-release type:", PRERELEASE_TYPES)

    info = determine_new_version(io_layer, env_config, args.increment, pre_release)
    print(format_version_summary(info))

    immutable_tag, mutable_tag = info.immutable_tag, info.mutable_tag
    action = select(
        f"Create tags:\n{format_tag_pair(immutable_tag, mutable_tag)}",
        [ACTION_GENERATED, ACTION_CUSTOM, ACTION_CANCEL],
        default=ACTION_GENERATED,
    )
    if action == ACTION_CANCEL:
        print("Release cancelled")
        return 0

    if action == ACTION_CUSTOM:
        suggested = immutable_tag if _check_custom_tag(immutable_tag) is None else None
        immutable_tag = text("What is your immutable tag (e.g. v1.2.3-dev)?",
                             default=suggested, validate=_check_custom_tag)
        names = env_config.environment_names()
        mutable_tag = text("What is your mutable tag (e.g. dev)?", default=mutable_tag,
                           validate=lambda tag: _check_custom_mutable_tag(tag, names))

    if not args.yes and not confirm(
        f"About to create tags:\n{format_tag_pair(immutable_tag, mutable_tag)}\n\nProceed?",
        default=False,
    ):
        print("Release cancelled")
        return 0

    result = execute_release(info, io_layer, immutable_tag=immutable_tag, mutable_tag=mutable_tag)
    if not result.success:
        for error in result.errors:
            print(f"Error: {error}")
        return 1

    if result.dry_run:
        print("Dry run complete, no tags were created")
    else:
        print("Tags created and pushed successfully!")
    return 0


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    if args.validate is not None:
        sys.exit(run_validate(args.validate))

    try:
        repo = setup_repo(".")
        io_layer = IOLayer(repo, dry_run=args.dry_run)

        if args.config:
            setup_config(io_layer)
            return

        env_config = io_layer.load_config()
        if env_config is None:
            print("No configuration found. Setting up configuration...")
            setup_config(io_layer)
            return

        sys.exit(create_release(io_layer, env_config, args))
    except TagManagerError as e:
        print(f"An error occurred: {e}")
        sys.exit(1)
    except (KeyboardInterrupt, EOFError, typer.Abort):
        print("\nRelease cancelled")
        sys.exit(130)


if __name__ == "__main__":
    main()
