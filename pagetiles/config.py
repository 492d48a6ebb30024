"""Runtime settings read from the environment."""

import os
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

# Well-known keys shared between the app state, results and templates
DEFINITIONS_REGISTRY_KEY = "tiles_definitions_registry"
TEMPLATES_KEY = "tiles_templates"
ACTION_REGISTRY_KEY = "tiles_action_registry"
DEFAULT_LOCALE_KEY = "tiles_default_locale"


class TilesSettings(BaseModel):
    """Locations and defaults for a pagetiles application."""

    definitions_dir: Path = Field(
        default=Path("tiles"),
        description="Directory holding YAML/JSON tiles definitions",
    )
    templates_dir: Path = Field(
        default=Path("templates"),
        description="Root directory of Jinja2 layout and fragment templates",
    )
    actions_file: Path = Field(
        default=Path("actions.yaml"),
        description="YAML file mapping action names to classes and results",
    )
    default_locale: str = Field(
        default="en",
        description="Locale used when the request carries no Accept-Language",
    )
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper()

    @classmethod
    def from_env(cls) -> "TilesSettings":
        """Build settings from TILES_* environment variables."""
        return cls(
            definitions_dir=Path(os.environ.get("TILES_DEFINITIONS_DIR", "tiles")),
            templates_dir=Path(os.environ.get("TILES_TEMPLATES_DIR", "templates")),
            actions_file=Path(os.environ.get("TILES_ACTIONS_FILE", "actions.yaml")),
            default_locale=os.environ.get("TILES_DEFAULT_LOCALE", "en"),
            log_level=os.environ.get("TILES_LOG_LEVEL", "INFO"),
        )
