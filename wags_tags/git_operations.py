"""
Git Operations Module for Wags Tags

This module handles repository setup and the interpretation of raw git
command output.

Functions:
    setup_repo: Opens the Git repository containing the working directory
    filter_branch_names: Turns `git branch -a` output into selectable branch names

Raises:
    GitOperationError: When Git operations fail
"""

from typing import List

from git import Repo
from git.exc import GitError

from .config import IGNORED_BRANCH_MARKERS
from .exceptions import GitOperationError


def setup_repo(path: str = ".") -> Repo:
    """Open the Git repository at or above `path`."""
    try:
        return Repo(path, search_parent_directories=True)
    except GitError as e:
        raise GitOperationError(f"Failed to open git repository: {e}") from e


def filter_branch_names(output: str) -> List[str]:
    """Extract local branch names from `git branch -a` output.

    Remote refs, the HEAD pointer, detached-HEAD markers and work branches
    (feature/, feat/, hotfix/, refactor/) are dropped; the result is
    deduplicated and sorted.
    """
    branches = set()
    for line in output.split("\n"):
        branch = line.strip()
        if not branch or any(marker in branch for marker in IGNORED_BRANCH_MARKERS):
            continue
        branch = branch.removeprefix("* ").strip()
        if branch.startswith("("):
            continue
        branches.add(branch)
    return sorted(branches)
