"""Result base class."""

import logging
import re
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pagetiles.actions.invocation import ActionInvocation

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"\$\{\s*([A-Za-z_][\w.]*)\s*\}")


class ResultSupport:
    """Base for results that render to a configured location.

    Subclasses implement execute(location, invocation). render() is the
    entry point used by ActionInvocation: it expands `${name}` placeholders
    in the location from the action's attributes (dotted paths allowed),
    then calls execute().
    """

    def __init__(self, location: str, parse: bool = True):
        self.location = location
        self.parse = parse

    def render(self, invocation: "ActionInvocation") -> None:
        location = self.location
        if self.parse:
            location = self.conditional_parse(location, invocation)
        self.execute(location, invocation)

    def conditional_parse(self, location: str, invocation: "ActionInvocation") -> str:
        """Replace ${...} placeholders with action attribute values."""

        def lookup(match: re.Match) -> str:
            value: Any = invocation.action
            for part in match.group(1).split("."):
                value = getattr(value, part, None)
                if value is None:
                    return ""
            return str(value)

        parsed = _PLACEHOLDER.sub(lookup, location)
        if parsed != location:
            logger.debug(f"Parsed result location {location!r} -> {parsed!r}")
        return parsed

    def execute(self, location: str, invocation: "ActionInvocation") -> None:
        raise NotImplementedError
