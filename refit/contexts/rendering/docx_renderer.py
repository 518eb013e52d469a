"""
DOCX backend.

Emits the same blocks as the PDF backend as native Word constructs: headings,
paragraphs and "List Bullet" paragraphs, each with the block's font size, weight,
color and spacing. Word reflows text itself, so page_break blocks and the
continuation pieces of split paragraphs are skipped; the first piece of a split
block carries its full text.
"""

from io import BytesIO

from docx import Document
from docx.document import Document as DocxDocument
from docx.shared import Pt, RGBColor
from docx.text.paragraph import Paragraph

from refit.contexts.templating.layout_engine import Block, BlockKind, Layout

BULLET_STYLE = "List Bullet"


def _rgb(color: str) -> RGBColor:
    return RGBColor.from_string(color.lstrip("#").upper())


def _setup_document(document: DocxDocument, doc_layout: Layout, title: str) -> None:
    config = doc_layout.config

    normal = document.styles["Normal"]
    normal.font.name = config.typography.font
    normal.font.size = Pt(config.typography.body_size)
    normal.paragraph_format.space_before = Pt(0)
    normal.paragraph_format.space_after = Pt(0)
    normal.paragraph_format.line_spacing = config.spacing.line_spacing

    margin = Pt(config.spacing.margin)
    for section in document.sections:
        section.page_width = Pt(doc_layout.page_width)
        section.page_height = Pt(doc_layout.page_height)
        section.top_margin = margin
        section.bottom_margin = margin
        section.left_margin = margin
        section.right_margin = margin

    document.core_properties.title = title or "Resume"


def _add_block(document: DocxDocument, block: Block, font_name: str, line_spacing: float) -> Paragraph:
    if block.kind is BlockKind.HEADING:
        paragraph = document.add_heading("", level=block.level)
    elif block.kind is BlockKind.BULLET:
        paragraph = document.add_paragraph(style=BULLET_STYLE)
    else:
        paragraph = document.add_paragraph()

    run = paragraph.add_run(block.text)
    run.font.name = font_name
    run.font.size = Pt(block.font_size)
    run.font.bold = block.bold
    run.font.color.rgb = _rgb(block.color)

    paragraph_format = paragraph.paragraph_format
    paragraph_format.space_before = Pt(block.space_before)
    paragraph_format.space_after = Pt(block.space_after)
    paragraph_format.line_spacing = line_spacing
    if block.keep_with_next:
        paragraph_format.keep_with_next = True

    return paragraph


def render_docx(doc_layout: Layout, title: str = "") -> bytes:
    """
    Render a layout to DOCX bytes.

    Args:
        doc_layout: Layout (pagination is ignored)
        title: Core-properties title

    Returns:
        DOCX file content
    """
    document = Document()
    _setup_document(document, doc_layout, title)

    font_name = doc_layout.config.typography.font
    line_spacing = doc_layout.config.spacing.line_spacing
    for block in doc_layout.blocks:
        if block.kind is BlockKind.PAGE_BREAK or block.continuation:
            continue
        _add_block(document, block, font_name, line_spacing)

    buffer = BytesIO()
    document.save(buffer)
    return buffer.getvalue()
