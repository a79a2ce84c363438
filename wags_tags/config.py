"""
Configuration Module for Wags Tags

This module contains constants used throughout the application.
They define the tag grammar keywords, the configuration file location
and the default branch-to-environment mapping.

Constants:
    ALLOWED_ENVS: Environment suffixes accepted by the tag grammar
    PRERELEASE_TYPES: Pre-release suffixes accepted by the tag grammar
    PRODUCTION_ENV: Environment suffix that production tags must never carry
    PRODUCTION_MUTABLE_TAG: Floating tag moved by production releases
    MAIN_BRANCHES: Branch names treated as the main line when unmapped
    SEED_VERSION: Version used when a repository has no usable tags yet
    MAX_VERSION_COMPONENT: Upper bound for each version number
    CONFIG_FILENAMES: Candidate configuration files, in lookup order
    DEFAULT_ENVIRONMENTS: Mapping used when a config file is malformed
    IGNORED_BRANCH_MARKERS: Branch name fragments hidden from the setup wizard
"""

import os

ALLOWED_ENVS = ["dev", "qa", "stg", "prod"]
PRERELEASE_TYPES = ["alpha", "beta", "rc"]
PRODUCTION_ENV = "prod"
PRODUCTION_MUTABLE_TAG = "latest"
MAIN_BRANCHES = ("main", "master")
SEED_VERSION = "0.1.0"
MAX_VERSION_COMPONENT = 999

CONFIG_FILENAMES = (".tag-manager.json", ".tag-manager.yaml", ".tag-manager.yml")
GIT_REMOTE = os.getenv("WAGS_TAGS_REMOTE", "origin")

DEFAULT_ENVIRONMENTS = [
    {"name": "dev", "branch": "develop", "isProduction": False},
    {"name": "qa", "branch": "qa", "isProduction": False},
    {"name": "staging", "branch": "staging", "isProduction": False},
    {"name": "prod", "branch": "main", "isProduction": True},
]

# Setup wizard slots: (environment name, default branch, is production)
WIZARD_ENVIRONMENTS = [
    ("dev", "develop", False),
    ("qa", "qa", False),
    ("stg", "staging", False),
    ("prod", "main", True),
]
SKIP_CHOICE = "Skip this environment"

IGNORED_BRANCH_MARKERS = ("HEAD ->", "origin/", "feature/", "feat/", "hotfix/", "refactor/")
