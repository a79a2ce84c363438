"""
Environment Configuration Module

Handles parsing and validation of the branch-to-environment mapping.
This is a pure module - no side effects, just data transformation.
Reading and writing the file itself lives in the I/O layer.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional, Any

from .config import DEFAULT_ENVIRONMENTS
from .models import Environment


def validate_config_data(data: Any) -> List[str]:
    """Validate raw configuration data as loaded from disk.

    Args:
        data: Parsed JSON or YAML document

    Returns:
        List of error messages (empty if valid)
    """
    if not isinstance(data, dict):
        return ["Configuration must be a mapping"]

    environments = data.get("environments")
    if not isinstance(environments, list):
        return ["'environments' must be a list"]

    errors = []
    names = set()
    branches = set()
    for i, env in enumerate(environments, 1):
        if not isinstance(env, dict):
            errors.append(f"Environment #{i} must be a mapping")
            continue

        name = env.get("name")
        branch = env.get("branch")
        if not name or not isinstance(name, str):
            errors.append(f"Environment #{i} is missing a name")
        if not branch or not isinstance(branch, str):
            errors.append(f"Environment #{i} is missing a branch")
        if not isinstance(env.get("isProduction"), bool):
            errors.append(f"Environment #{i} 'isProduction' must be true or false")

        if isinstance(name, str) and name:
            if name in names:
                errors.append(f"Environment name '{name}' is used more than once")
            names.add(name)
        if isinstance(branch, str) and branch:
            if branch in branches:
                errors.append(f"Branch '{branch}' is mapped to more than one environment")
            branches.add(branch)

    return errors


@dataclass
class EnvironmentConfig:
    """Branch-to-environment mapping, passed explicitly to the planner."""

    environments: List[Environment] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EnvironmentConfig":
        """Create configuration from a parsed config document.

        Args:
            data: Mapping with an 'environments' list

        Returns:
            EnvironmentConfig instance

        Raises:
            ValueError: If the document is structurally invalid
        """
        errors = validate_config_data(data)
        if errors:
            raise ValueError("; ".join(errors))
        return cls(environments=[Environment.from_dict(env) for env in data["environments"]])

    @classmethod
    def default(cls) -> "EnvironmentConfig":
        return cls.from_dict({"environments": DEFAULT_ENVIRONMENTS})

    def to_dict(self) -> Dict[str, Any]:
        return {"environments": [env.to_dict() for env in self.environments]}

    def validate(self) -> List[str]:
        """Validate the configuration.

        Returns:
            List of error messages (empty if valid)
        """
        return validate_config_data(self.to_dict())

    def get_environment(self, name: str) -> Optional[Environment]:
        return next((env for env in self.environments if env.name == name), None)

    def get_environment_by_branch(self, branch: str) -> Optional[Environment]:
        return next((env for env in self.environments if env.branch == branch), None)

    def is_production_environment(self, name: str) -> bool:
        env = self.get_environment(name)
        return env.is_production if env else False

    def get_branch_for_environment(self, name: str) -> Optional[str]:
        env = self.get_environment(name)
        return env.branch if env else None

    def environment_names(self) -> List[str]:
        return [env.name for env in self.environments]
