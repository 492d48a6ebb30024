"""pagetiles - Tiles layout results for action-dispatch web apps.

Renders action results through named page layout definitions:
- Definitions (layout path, attributes, optional controller) per locale
- Per-request attribute context shared by nested renders
- Dispatch to Jinja2 layout templates
"""

__version__ = "0.1.0"
