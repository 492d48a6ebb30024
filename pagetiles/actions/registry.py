"""Action registry - loads action mappings from actions.yaml."""

import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from pagetiles.config import TilesSettings

from .schemas import ActionConfig, ActionsFile

logger = logging.getLogger(__name__)


class ActionRegistry:
    """Registry of action configurations."""

    def __init__(self, actions_file: Optional[Path] = None):
        if actions_file is None:
            actions_file = TilesSettings.from_env().actions_file
        self.actions_file = actions_file
        self.default_result_type = "dispatcher"
        self._actions: dict[str, ActionConfig] = {}
        self._loaded = False

    def load(self) -> None:
        """Load action configurations from YAML.

        Raises:
            ValidationError: If the file does not describe valid actions
        """
        if self._loaded:
            return

        if not self.actions_file.exists():
            logger.warning(f"Actions file not found: {self.actions_file}")
            self._loaded = True
            return

        with open(self.actions_file) as f:
            data = yaml.safe_load(f) or {}

        try:
            parsed = ActionsFile.model_validate(data)
        except ValidationError as e:
            logger.error(f"Invalid actions file {self.actions_file}: {e}")
            raise

        self.default_result_type = parsed.default_result_type
        self._actions = {action.name: action for action in parsed.actions}
        self._loaded = True
        logger.info(f"Loaded {len(self._actions)} actions (default result type: {self.default_result_type})")

    def get(self, name: str) -> Optional[ActionConfig]:
        """Get an action configuration by name."""
        self.load()
        return self._actions.get(name)

    def list_names(self) -> list[str]:
        self.load()
        return sorted(self._actions)

    def count(self) -> int:
        self.load()
        return len(self._actions)


# Global registry instance
_registry: Optional[ActionRegistry] = None


def get_action_registry(actions_file: Optional[Path] = None) -> ActionRegistry:
    """Get the global action registry instance."""
    global _registry
    if _registry is None:
        _registry = ActionRegistry(actions_file)
        _registry.load()
    return _registry
