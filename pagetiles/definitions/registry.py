"""Definitions registry — loads and serves tiles definitions.

Follows the usual registry pattern:
- YAML files with a `definitions:` list, or JSON files (object or list)
- Lazy loading with _loaded guard
- In-memory dict keyed by (name, locale)
- Global singleton via get_definitions_registry()
- extends resolved once after loading
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from pagetiles.actions.locale import normalize_locale
from pagetiles.config import TilesSettings

from .schemas import DefinitionSummary, TileDefinition

logger = logging.getLogger(__name__)


def locale_candidates(locale: Optional[str]) -> list[str]:
    """Lookup order for a locale: 'fr_CA_x' -> 'fr_CA' -> 'fr' -> ''."""
    candidates: list[str] = []
    parts = normalize_locale(locale or "").split("_")
    while parts and parts[0]:
        candidates.append("_".join(parts))
        parts = parts[:-1]
    candidates.append("")
    return candidates


class DefinitionsRegistry:
    """Registry of tiles definitions loaded from a directory."""

    def __init__(self, definitions_dir: Optional[Path] = None):
        if definitions_dir is None:
            definitions_dir = TilesSettings.from_env().definitions_dir
        self.definitions_dir = definitions_dir
        self._definitions: dict[tuple[str, str], TileDefinition] = {}
        self._loaded = False

    def load(self) -> None:
        """Load all definitions from YAML and JSON files."""
        if self._loaded:
            return

        if not self.definitions_dir.exists():
            logger.warning(f"Tiles definitions directory not found: {self.definitions_dir}")
            self._loaded = True
            return

        raw: dict[tuple[str, str], TileDefinition] = {}
        for def_file in sorted(self.definitions_dir.iterdir()):
            if def_file.suffix not in (".yaml", ".yml", ".json"):
                continue
            try:
                entries = self._read_file(def_file)
            except (OSError, ValueError, yaml.YAMLError) as e:
                logger.error(f"Failed to read definitions from {def_file}: {e}")
                continue

            for entry in entries:
                try:
                    definition = TileDefinition.model_validate(entry)
                except ValidationError as e:
                    logger.error(f"Invalid definition in {def_file}: {e}")
                    continue
                if definition.key in raw:
                    logger.warning(
                        f"Definition {definition.name!r} ({definition.locale or 'default'}) "
                        f"redefined in {def_file}"
                    )
                raw[definition.key] = definition
                logger.debug(f"Loaded definition: {definition.name} [{definition.locale}]")

        self._definitions = self._resolve_inheritance(raw)
        self._loaded = True
        logger.info(f"Loaded {len(self._definitions)} tiles definitions")

    @staticmethod
    def _read_file(def_file: Path) -> list[dict[str, Any]]:
        with open(def_file, "r") as f:
            if def_file.suffix == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f) or {}

        if isinstance(data, dict) and "definitions" in data:
            data = data["definitions"] or []
        if isinstance(data, dict):
            return [data]
        if isinstance(data, list):
            return data
        raise ValueError(f"Unexpected top-level type {type(data).__name__}")

    def _resolve_inheritance(
        self, raw: dict[tuple[str, str], TileDefinition]
    ) -> dict[tuple[str, str], TileDefinition]:
        """Flatten `extends` chains into self-contained definitions."""
        resolved: dict[tuple[str, str], TileDefinition] = {}

        def find_parent(name: str, locale: str) -> Optional[TileDefinition]:
            for candidate in locale_candidates(locale):
                parent = raw.get((name, candidate))
                if parent is not None:
                    return parent
            return None

        def resolve(definition: TileDefinition, chain: tuple[str, ...]) -> TileDefinition:
            if definition.key in resolved:
                return resolved[definition.key]
            if definition.extends is None:
                return definition
            if definition.extends in chain:
                raise ValueError(f"Inheritance cycle: {' -> '.join(chain + (definition.extends,))}")

            parent = find_parent(definition.extends, definition.locale)
            if parent is None:
                raise ValueError(f"Unknown parent definition '{definition.extends}'")
            parent = resolve(parent, chain + (definition.extends,))

            return definition.model_copy(
                update={
                    "path": definition.path or parent.path,
                    "controller_class": definition.controller_class or parent.controller_class,
                    "attributes": {**parent.attributes, **definition.attributes},
                }
            )

        for key, definition in raw.items():
            try:
                resolved[key] = resolve(definition, (definition.name,))
            except ValueError as e:
                logger.error(f"Dropping definition '{definition.name}': {e}")

        return resolved

    def get_definition(self, name: str, locale: Optional[str] = None) -> Optional[TileDefinition]:
        """Get the best definition variant for a name and locale."""
        self.load()
        for candidate in locale_candidates(locale):
            definition = self._definitions.get((name, candidate))
            if definition is not None:
                logger.debug(f"Resolved definition {name!r} for locale {locale!r} -> {candidate!r}")
                return definition
        return None

    def list_all(self) -> list[TileDefinition]:
        self.load()
        return list(self._definitions.values())

    def list_summaries(self) -> list[DefinitionSummary]:
        """List definition summaries sorted by name and locale."""
        self.load()
        return [
            DefinitionSummary(
                name=d.name,
                locale=d.locale,
                path=d.path,
                extends=d.extends,
                attribute_names=sorted(d.attributes),
                has_controller=d.controller_class is not None,
            )
            for d in sorted(self._definitions.values(), key=lambda d: d.key)
        ]

    def list_names(self) -> list[str]:
        """List distinct definition names."""
        self.load()
        return sorted({name for name, _ in self._definitions})

    def count(self) -> int:
        """Get total number of definitions, counting each locale variant."""
        self.load()
        return len(self._definitions)

    def reload(self) -> None:
        """Force reload all definitions."""
        self._loaded = False
        self._definitions.clear()
        self.load()


# Global registry instance
_registry: Optional[DefinitionsRegistry] = None


def get_definitions_registry(definitions_dir: Optional[Path] = None) -> DefinitionsRegistry:
    """Get the global definitions registry instance."""
    global _registry
    if _registry is None:
        _registry = DefinitionsRegistry(definitions_dir)
        _registry.load()
    return _registry
