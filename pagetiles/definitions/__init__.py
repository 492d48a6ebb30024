"""Tiles definitions - named page layouts and their per-request context.

Architecture:
- schemas.py     - Pydantic models for definitions
- registry.py    - DefinitionsRegistry for loading definition files
- context.py     - AttributeContext stored on the request
- controllers.py - Controller hook protocol and loader
"""

from .context import ATTRIBUTE_CONTEXT_KEY, AttributeContext
from .controllers import Controller
from .registry import DefinitionsRegistry, get_definitions_registry
from .schemas import DefinitionSummary, TileDefinition

__all__ = [
    "ATTRIBUTE_CONTEXT_KEY",
    "AttributeContext",
    "Controller",
    "DefinitionsRegistry",
    "DefinitionSummary",
    "TileDefinition",
    "get_definitions_registry",
]
