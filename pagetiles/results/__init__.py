"""Results - render an action's outcome.

Architecture:
- base.py       - ResultSupport with ${...} location parsing
- dispatcher.py - DispatcherResult forwarding to a Jinja2 template
- tiles.py      - TilesResult forwarding through a tiles definition
- types.py      - result type registry
- templating.py - Jinja2 environment factory
"""

from .base import ResultSupport
from .dispatcher import DispatcherResult
from .templating import create_templates
from .tiles import TilesResult
from .types import create_result, get_result_type, register_result_type

__all__ = [
    "DispatcherResult",
    "ResultSupport",
    "TilesResult",
    "create_result",
    "create_templates",
    "get_result_type",
    "register_result_type",
]
