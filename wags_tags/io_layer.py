"""
I/O Layer for Wags Tags

This module contains all I/O operations (configuration file, Git)
separated from business logic. This is the "imperative shell" that
handles all side effects.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional, Any
import yaml
from git import Repo
from git.exc import GitCommandError

from .config import CONFIG_FILENAMES, GIT_REMOTE
from .environment import EnvironmentConfig, validate_config_data
from .exceptions import GitOperationError
from .git_operations import filter_branch_names
from .versioning import select_latest_tag

logger = logging.getLogger(__name__)


class IOLayer:
    """Handles all I/O operations for the application."""

    def __init__(self, repo: Repo, dry_run: bool = False, base_path: str = ".", remote: str = GIT_REMOTE):
        """Initialize the I/O layer.

        Args:
            repo: Git repository object
            dry_run: If True, don't perform actual writes
            base_path: Directory holding the configuration file
            remote: Remote that tags are fetched from and pushed to
        """
        self.repo = repo
        self.dry_run = dry_run
        self.base_path = Path(base_path)
        self.remote = remote
        self._tags_fetched: Optional[bool] = None

    # -----------------------------------------------------------------------------
    # Configuration File Operations
    # -----------------------------------------------------------------------------

    def find_config_path(self) -> Path:
        """Return the first existing config file, or the default JSON path."""
        for name in CONFIG_FILENAMES:
            path = self.base_path / name
            if path.exists():
                return path
        return self.base_path / CONFIG_FILENAMES[0]

    def read_config_data(self, path: Path) -> Any:
        """Parse a configuration file as JSON or YAML based on its suffix."""
        with path.open(encoding="utf-8") as f:
            if path.suffix in (".yaml", ".yml"):
                return yaml.safe_load(f)
            return json.load(f)

    def load_config(self) -> Optional[EnvironmentConfig]:
        """Load the environment configuration.

        Returns:
            The parsed configuration, the default mapping if the file is
            structurally invalid, or None if there is no readable file
        """
        path = self.find_config_path()
        if not path.exists():
            return None

        try:
            data = self.read_config_data(path)
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.error(f"Error loading config {path}: {e}")
            return None

        errors = validate_config_data(data)
        if errors:
            logger.warning(f"Invalid config {path} ({'; '.join(errors)}), using default environments")
            return EnvironmentConfig.default()

        return EnvironmentConfig.from_dict(data)

    def save_config(self, env_config: EnvironmentConfig) -> bool:
        """Write the environment configuration.

        Returns:
            True if written, False if invalid, unwritable or dry run
        """
        errors = env_config.validate()
        if errors:
            logger.error(f"Refusing to save invalid config: {'; '.join(errors)}")
            return False

        path = self.find_config_path()
        if self.dry_run:
            print(f"[DRY RUN] Would write configuration to {path}")
            return False

        data = env_config.to_dict()
        try:
            with path.open("w", encoding="utf-8") as f:
                if path.suffix in (".yaml", ".yml"):
                    yaml.safe_dump(data, f, sort_keys=False)
                else:
                    f.write(json.dumps(data, indent=2) + "\n")
        except OSError as e:
            logger.error(f"Error saving config {path}: {e}")
            return False

        return True

    # -----------------------------------------------------------------------------
    # Git Read Operations
    # -----------------------------------------------------------------------------

    def get_current_branch(self) -> str:
        """Return the checked out branch name ("HEAD" when detached)."""
        try:
            return self.repo.git.rev_parse("--abbrev-ref", "HEAD").strip()
        except GitCommandError as e:
            raise GitOperationError(f"Failed to get current branch: {e}") from e

    def list_branches(self) -> List[str]:
        """Return selectable branch names, empty if git fails."""
        try:
            output = self.repo.git.branch("-a")
        except GitCommandError as e:
            logger.error(f"Error getting Git branches: {e}")
            return []
        return filter_branch_names(output)

    def fetch_tags(self) -> bool:
        """Fetch tags from the remote, at most once per run.

        Returns:
            True if the fetch succeeded
        """
        if self._tags_fetched is not None:
            return self._tags_fetched
        try:
            self.repo.git.fetch(self.remote, "--tags")
            self._tags_fetched = True
        except GitCommandError as e:
            logger.warning(f"Could not fetch tags, using local tags only: {e}")
            self._tags_fetched = False
        return self._tags_fetched

    def list_tags(self) -> List[str]:
        try:
            output = self.repo.git.tag("-l")
        except GitCommandError as e:
            raise GitOperationError(f"Failed to list tags: {e}") from e
        return [line.strip() for line in output.split("\n") if line.strip()]

    def get_latest_tag(self, environment: Optional[str] = None) -> Optional[str]:
        """Return the latest tag for an environment, or the latest production tag."""
        self.fetch_tags()
        return select_latest_tag(self.list_tags(), environment)

    # -----------------------------------------------------------------------------
    # Git Write Operations
    # -----------------------------------------------------------------------------

    def create_tag(self, name: str, message: Optional[str] = None, force: bool = False) -> bool:
        """Create a tag at HEAD.

        Args:
            name: Tag name
            message: Annotation message; a lightweight tag is created if None
            force: If True, move an existing tag

        Returns:
            True if created, False if dry run
        """
        if self.dry_run:
            action = "force-create" if force else "create"
            print(f"[DRY RUN] Would {action} tag: {name}")
            return False

        args = ["-f"] if force else []
        if message:
            args += ["-a", name, "-m", message]
        else:
            args.append(name)

        try:
            self.repo.git.tag(*args)
        except GitCommandError as e:
            raise GitOperationError(f"Failed to create tag {name}: {e}") from e
        return True

    def push_tag(self, name: str, force: bool = False) -> bool:
        """Push a tag to the remote.

        Returns:
            True if pushed, False if dry run
        """
        if self.dry_run:
            action = "force-push" if force else "push"
            print(f"[DRY RUN] Would {action} tag {name} to {self.remote}")
            return False

        args = ["-f"] if force else []
        args += [self.remote, f"refs/tags/{name}"]
        try:
            self.repo.git.push(*args)
        except GitCommandError as e:
            raise GitOperationError(f"Failed to push tag {name}: {e}") from e
        return True
