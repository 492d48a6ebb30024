"""Result type registry."""

from typing import Optional

from pagetiles.actions.schemas import ResultConfig
from pagetiles.errors import ConfigurationError

from .base import ResultSupport
from .dispatcher import DispatcherResult
from .tiles import TilesResult

_result_types: dict[str, type[ResultSupport]] = {
    "dispatcher": DispatcherResult,
    "tiles": TilesResult,
}


def register_result_type(name: str, result_cls: type[ResultSupport]) -> None:
    """Make a result class available to action configurations."""
    _result_types[name] = result_cls


def get_result_type(name: str) -> Optional[type[ResultSupport]]:
    return _result_types.get(name)


def create_result(config: ResultConfig, default_type: str = "dispatcher") -> ResultSupport:
    """Instantiate the result for a result configuration."""
    type_name = config.type or default_type
    result_cls = _result_types.get(type_name)
    if result_cls is None:
        raise ConfigurationError(
            f"Unknown result type '{type_name}'. Available: {sorted(_result_types)}"
        )
    return result_cls(config.location, parse=config.parse)
