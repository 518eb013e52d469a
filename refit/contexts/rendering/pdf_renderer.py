"""
PDF backend.

Paints a Layout onto Letter pages with reportlab's canvas, using the absolute
offsets computed by the layout engine. The renderer makes no layout decisions of
its own: every line, page break and color comes from the blocks.
"""

from io import BytesIO

from reportlab.lib.colors import HexColor
from reportlab.pdfgen import canvas

from refit.contexts.templating.fonts import StandardFont, standard_font
from refit.contexts.templating.layout_engine import Block, BlockKind, Layout

BULLET_MARKER = "•"
BULLET_MARKER_OFFSET = 12.0
RULE_OFFSET = 2.0
RULE_WIDTH = 0.75


def _baseline(page_height: float, block: Block, line_index: int) -> float:
    """Canvas y of a line's baseline; the layout measures down from the page top."""
    return page_height - (block.top + line_index * block.line_height + block.font_size)


def _draw_block(pdf: canvas.Canvas, block: Block, font: StandardFont, doc_layout: Layout) -> None:
    margin = doc_layout.config.spacing.margin
    x = margin + block.indent

    pdf.setFont(font.face(block.bold), block.font_size)
    pdf.setFillColor(HexColor(block.color))
    for i, line in enumerate(block.lines):
        pdf.drawString(x, _baseline(doc_layout.page_height, block, i), line)

    if block.kind is BlockKind.BULLET and not block.continuation:
        pdf.drawString(
            x - BULLET_MARKER_OFFSET, _baseline(doc_layout.page_height, block, 0), BULLET_MARKER
        )

    if block.rule:
        y = doc_layout.page_height - (block.top + block.height + RULE_OFFSET)
        pdf.setStrokeColor(HexColor(block.color))
        pdf.setLineWidth(RULE_WIDTH)
        pdf.line(margin, y, doc_layout.page_width - margin, y)


def render_pdf(doc_layout: Layout, title: str = "") -> bytes:
    """
    Render a layout to PDF bytes.

    Args:
        doc_layout: Paginated layout
        title: Document title metadata

    Returns:
        PDF file content
    """
    buffer = BytesIO()
    pdf = canvas.Canvas(buffer, pagesize=(doc_layout.page_width, doc_layout.page_height))
    pdf.setTitle(title or "Resume")

    font = standard_font(doc_layout.config.typography.font)
    for block in doc_layout.blocks:
        if block.kind is BlockKind.PAGE_BREAK:
            pdf.showPage()
            continue
        _draw_block(pdf, block, font, doc_layout)

    pdf.showPage()
    pdf.save()
    return buffer.getvalue()
