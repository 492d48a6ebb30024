"""Actions - request handlers that return symbolic result codes.

Architecture:
- base.py       - Action base class, result codes, LocaleProvider capability
- schemas.py    - Pydantic models for action/result configuration
- registry.py   - ActionRegistry loading actions.yaml
- invocation.py - ActionInvocation running an action and its result
- locale.py     - Accept-Language negotiation
"""

from .base import ERROR, INPUT, NONE, SUCCESS, Action, LocaleProvider
from .invocation import ActionInvocation
from .locale import request_locale
from .registry import ActionRegistry, get_action_registry
from .schemas import ActionConfig, ResultConfig

__all__ = [
    "ERROR",
    "INPUT",
    "NONE",
    "SUCCESS",
    "Action",
    "ActionConfig",
    "ActionInvocation",
    "ActionRegistry",
    "LocaleProvider",
    "ResultConfig",
    "get_action_registry",
    "request_locale",
]
