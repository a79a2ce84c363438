"""Test fixtures for Wags Tags.

This module provides shared fixtures used across multiple test modules.

Fixtures:
    env_config: The four-environment mapping used by most planner tests
    tag_lookup: Factory for fake latest-tag lookups over a fixed tag list
    mock_repo: A mock GitPython repository
    io_layer: An IOLayer over mock_repo rooted in a temporary directory
"""

from unittest.mock import Mock

import pytest

from wags_tags.environment import EnvironmentConfig
from wags_tags.io_layer import IOLayer
from wags_tags.versioning import select_latest_tag


@pytest.fixture
def env_config():
    """dev/qa/stg/prod mapped to develop/qa/staging/main, prod is production."""
    return EnvironmentConfig.from_dict({
        "environments": [
            {"name": "dev", "branch": "develop", "isProduction": False},
            {"name": "qa", "branch": "qa", "isProduction": False},
            {"name": "stg", "branch": "staging", "isProduction": False},
            {"name": "prod", "branch": "main", "isProduction": True},
        ]
    })


@pytest.fixture
def tag_lookup():
    """Builds a latest-tag lookup over a fixed list of tags.

    Returns:
        Callable taking a list of tags and returning a lookup function
        that records every scope it was asked for in `.calls`.
    """
    def factory(tags):
        def lookup(environment=None):
            lookup.calls.append(environment)
            return select_latest_tag(tags, environment)
        lookup.calls = []
        return lookup
    return factory


@pytest.fixture
def mock_repo():
    """Creates a mock Git repository with a mock git command wrapper."""
    repo = Mock()
    repo.git = Mock()
    repo.git.tag.return_value = ""
    return repo


@pytest.fixture
def io_layer(mock_repo, tmp_path):
    """Creates an IOLayer over a mock repository, config stored in tmp_path."""
    return IOLayer(mock_repo, dry_run=False, base_path=str(tmp_path))
