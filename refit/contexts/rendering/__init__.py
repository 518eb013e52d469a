"""
Rendering Context

Responsibilities:
- Paints a computed layout as PDF (absolute positioning on Letter pages)
- Emits the same layout as native DOCX paragraphs
- Packages output bytes with filename, media type and page count
- Writes request-scoped artifacts and removes them after delivery

Owns: Document backends, rendered-document lifecycle
Never: Decides section order, truncation or grouping (the layout does)
"""

from refit.contexts.rendering.exceptions import RenderError
from refit.contexts.rendering.renderer import (
    OutputFormat,
    RenderedDocument,
    render_layout,
    render_resume,
    write_rendered_document,
)

__all__ = [
    "RenderError",
    "OutputFormat",
    "RenderedDocument",
    "render_resume",
    "render_layout",
    "write_rendered_document",
]
