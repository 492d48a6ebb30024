"""Tests for AttributeContext (pagetiles.definitions.context)."""

from pagetiles.definitions.context import (
    ATTRIBUTE_CONTEXT_KEY,
    AttributeContext,
    attribute_context_processor,
)
from tests.conftest import make_request


class TestAttributeContext:
    def test_add_missing_keeps_existing_values(self):
        context = AttributeContext({"A": 99})
        context.add_missing({"A": 1, "B": 2})
        assert context.as_dict() == {"A": 99, "B": 2}

    def test_add_all_overwrites(self):
        context = AttributeContext({"A": 99})
        context.add_all({"A": 1})
        assert context["A"] == 1

    def test_get_attribute_default(self):
        context = AttributeContext()
        assert context.get_attribute("missing") is None
        assert context.get_attribute("missing", "x") == "x"

    def test_mapping_behaviour(self):
        context = AttributeContext({"a": 1, "b": 2})
        assert "a" in context
        assert len(context) == 2
        assert list(context) == ["a", "b"]
        assert context.attribute_names() == ["a", "b"]


class TestRequestStorage:
    def test_absent_by_default(self):
        assert AttributeContext.get_context(make_request()) is None

    def test_set_and_get(self):
        request = make_request()
        context = AttributeContext({"title": "x"})
        AttributeContext.set_context(context, request)

        assert AttributeContext.get_context(request) is context
        assert getattr(request.state, ATTRIBUTE_CONTEXT_KEY) is context

    def test_context_processor_exposes_tiles(self):
        request = make_request()
        assert len(attribute_context_processor(request)["tiles"]) == 0

        context = AttributeContext({"title": "x"})
        AttributeContext.set_context(context, request)
        assert attribute_context_processor(request)["tiles"] is context
