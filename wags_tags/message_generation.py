"""
Message Generation Module

Pure functions for generating tag annotations and user-facing summaries.
This module contains no side effects - only text formatting logic.
"""

from typing import List, Optional

from .models import TagFields, ValidationResult, VersionInfo


def generate_tag_message(tag: str) -> str:
    """Annotation message for an immutable release tag."""
    return f"Release {tag}"


def format_tag_pair(immutable_tag: str, mutable_tag: Optional[str]) -> str:
    """
    Render a tag pair as an indented list.

    Args:
        immutable_tag: The release tag
        mutable_tag: The floating tag, None when the release has none

    Returns:
        Multi-line string, e.g. "  - v1.2.3 (immutable)\\n  - latest (mutable)"
    """
    lines = [f"  - {immutable_tag} (immutable)"]
    lines.append(f"  - {mutable_tag} (mutable)" if mutable_tag else "  - no mutable tag")
    return "\n".join(lines)


def format_version_summary(info: VersionInfo) -> str:
    """Describe a planned release."""
    lines = [f"Branch: {info.branch}"]
    if info.environment:
        lines.append(f"Environment: {info.environment}")
    lines.append(f"Current version: {info.current_version}")
    return "\n".join(lines)


def format_validation_error(result: ValidationResult) -> str:
    return f"❌ {result.error}"


def format_tag_fields(fields: TagFields) -> List[str]:
    """One "key: value" line per parsed tag field."""
    return [
        f"Immutable tag: {fields.immutable_tag}",
        f"Mutable tag: {fields.mutable_tag}",
        f"Version: {fields.version_only}",
        f"Environment: {fields.env or 'production'}",
        f"Pre-release: {fields.pre_release or 'none'}",
    ]


def format_repository_setup_help() -> str:
    return (
        "\n❌ No remote branches found. Please ensure you have:\n"
        "  1. Initialized a Git repository (git init)\n"
        "  2. Added a remote repository (git remote add origin <url>)\n"
        "  3. Created at least one branch\n\n"
        "After setting up your repository, run 'wags-tags' again."
    )
