"""Per-request attribute context.

The context holds the attributes a layout and its fragments render. It lives
on request.state, so a fragment rendered by a nested dispatch within the
same request sees (and adds to) the same context.
"""

from typing import Any, Iterator, Mapping, Optional

from starlette.requests import Request

ATTRIBUTE_CONTEXT_KEY = "tiles_attribute_context"


class AttributeContext:
    """Mutable mapping of attribute names to values for one request."""

    def __init__(self, attributes: Optional[Mapping[str, Any]] = None):
        self._attributes: dict[str, Any] = dict(attributes or {})

    def get_attribute(self, name: str, default: Any = None) -> Any:
        return self._attributes.get(name, default)

    def put_attribute(self, name: str, value: Any) -> None:
        self._attributes[name] = value

    def add_all(self, attributes: Mapping[str, Any]) -> None:
        """Add attributes, overwriting existing entries."""
        self._attributes.update(attributes)

    def add_missing(self, attributes: Mapping[str, Any]) -> None:
        """Add only the attributes not already present. Existing values win."""
        for name, value in attributes.items():
            if name not in self._attributes:
                self._attributes[name] = value

    def attribute_names(self) -> list[str]:
        return list(self._attributes)

    def as_dict(self) -> dict[str, Any]:
        return dict(self._attributes)

    def __contains__(self, name: object) -> bool:
        return name in self._attributes

    def __getitem__(self, name: str) -> Any:
        return self._attributes[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._attributes)

    def __len__(self) -> int:
        return len(self._attributes)

    def __repr__(self) -> str:
        return f"AttributeContext({self._attributes!r})"

    @classmethod
    def get_context(cls, request: Request) -> Optional["AttributeContext"]:
        """Return the context stored on the request, if any."""
        return getattr(request.state, ATTRIBUTE_CONTEXT_KEY, None)

    @classmethod
    def set_context(cls, context: "AttributeContext", request: Request) -> None:
        setattr(request.state, ATTRIBUTE_CONTEXT_KEY, context)


def attribute_context_processor(request: Request) -> dict[str, Any]:
    """Jinja2Templates context processor exposing the context as `tiles`."""
    return {"tiles": AttributeContext.get_context(request) or AttributeContext()}
