"""Jinja2 template environment for layouts and fragments."""

from pathlib import Path
from typing import Union

import markdown as md
from fastapi.templating import Jinja2Templates
from markupsafe import Markup

from pagetiles.definitions.context import attribute_context_processor


def markdown_filter(text: str) -> Markup:
    """Render a Markdown attribute value as HTML."""
    return Markup(md.markdown(text or "", extensions=["tables", "fenced_code"]))


def create_templates(directory: Union[str, Path]) -> Jinja2Templates:
    """Build the template environment used by dispatcher results.

    Templates see the request, the action and `tiles`, the request's
    attribute context. Fragments named by attributes are included with
    `{% include tiles.get_attribute("body") %}`.
    """
    templates = Jinja2Templates(
        directory=str(directory),
        context_processors=[attribute_context_processor],
    )
    templates.env.filters["markdown"] = markdown_filter
    return templates
