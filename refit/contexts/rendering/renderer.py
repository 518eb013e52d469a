"""
Resume Rendering

Orchestrates the generation pipeline: resolve template and overrides, compute the
layout once, hand it to the PDF or DOCX backend, and wrap the bytes in a
RenderedDocument.

On-disk artifacts are request-scoped. `RenderedDocument.materialize()` writes the
bytes for a delivery step and deletes the file again on every exit path:

    document = render_resume(resume, registry, "tech_saas", {"accentColor": "#0ea5e9"}, "pdf")
    with document.materialize() as path:
        send_file(path, download_name=document.download_name(resume.name))
"""

import os
import re
import time
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, Mapping, Optional, Union

from dotenv import load_dotenv

from refit.contexts.intake.resume_data_structure import ParsedResume
from refit.contexts.rendering.docx_renderer import render_docx
from refit.contexts.rendering.exceptions import RenderError
from refit.contexts.rendering.logger import (
    _log_debug,
    _log_error,
    log_render_result,
    log_render_start,
)
from refit.contexts.rendering.pdf_renderer import render_pdf
from refit.contexts.templating.layout_engine import Layout, layout
from refit.contexts.templating.render_config import resolve_render_config
from refit.contexts.templating.template_registry import TemplateRegistry
from refit.utils.pdf_processing import page_count
from refit.utils.timestamp import timestamp_millis

load_dotenv()

EXPORTS_PATH = Path(os.getenv("EXPORTS_PATH", "outs/exports"))

PARTIAL_SUFFIX = ".part"


class OutputFormat(str, Enum):
    PDF = "pdf"
    DOCX = "docx"


MEDIA_TYPES = {
    OutputFormat.PDF: "application/pdf",
    OutputFormat.DOCX: "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}

BACKENDS: Dict[OutputFormat, Callable[[Layout, str], bytes]] = {
    OutputFormat.PDF: render_pdf,
    OutputFormat.DOCX: render_docx,
}


@dataclass(frozen=True)
class RenderedDocument:
    """
    Output of a render call. Owned by the caller.

    Attributes:
        content: File bytes
        filename: Generated unique name, e.g. resume-1731590000000.pdf
        media_type: MIME type for delivery
        format: "pdf" or "docx"
        page_count: Pages in the PDF (None for DOCX, which the viewer paginates)
    """

    content: bytes
    filename: str
    media_type: str
    format: str
    page_count: Optional[int] = None

    def download_name(self, base: str = "") -> str:
        """
        Name offered to the user when downloading.

        Examples:
            >>> document.download_name("Jane Doe")
            'Jane Doe.pdf'
            >>> document.download_name("")
            'resume.pdf'
        """
        safe = re.sub(r"[\\/:*?\"<>|\x00-\x1f]+", "_", base or "").strip(" ._")
        return f"{safe or 'resume'}.{self.format}"

    @contextmanager
    def materialize(self, output_dir: Optional[Path] = None) -> Iterator[Path]:
        """
        Write the document to disk for the duration of a delivery step.

        The file is removed when the block exits, whether delivery succeeded,
        was aborted, or raised.

        Args:
            output_dir: Directory for the file (defaults to EXPORTS_PATH)

        Yields:
            Path to the written file
        """
        path = write_rendered_document(self, output_dir)
        try:
            yield path
        finally:
            path.unlink(missing_ok=True)
            _log_debug(f"Removed {path}")


def write_rendered_document(document: RenderedDocument, output_dir: Optional[Path] = None) -> Path:
    """
    Write a rendered document through a temporary file.

    Bytes go to `<filename>.part` first and are renamed into place, so a failed
    write never leaves a truncated file under the final name.

    Raises:
        RenderError: If the file could not be written (partial file removed)
    """
    output_dir = Path(output_dir) if output_dir is not None else EXPORTS_PATH
    final_path = output_dir / document.filename
    partial_path = final_path.with_name(final_path.name + PARTIAL_SUFFIX)

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        partial_path.write_bytes(document.content)
        partial_path.replace(final_path)
    except OSError as e:
        partial_path.unlink(missing_ok=True)
        _log_error(f"Could not write {final_path}: {e}")
        raise RenderError(f"could not write {final_path.name}", document.format, e) from e

    _log_debug(f"Wrote {final_path} ({len(document.content)} bytes)")
    return final_path


def parse_output_format(output_format: Union[str, OutputFormat]) -> OutputFormat:
    """
    Normalize a requested output format ("pdf", ".DOCX", OutputFormat.PDF).

    Raises:
        RenderError: If the format is not pdf or docx
    """
    if isinstance(output_format, OutputFormat):
        return output_format
    try:
        return OutputFormat(str(output_format).strip().lower().lstrip("."))
    except ValueError as e:
        raise RenderError(
            f"unsupported output format '{output_format}'", str(output_format), e
        ) from e


def render_layout(doc_layout: Layout, output_format: Union[str, OutputFormat], title: str = "") -> RenderedDocument:
    """
    Run one backend over an already computed layout.

    Raises:
        RenderError: If the backend fails
    """
    fmt = parse_output_format(output_format)

    try:
        content = BACKENDS[fmt](doc_layout, title)
    except Exception as e:
        _log_error(f"{fmt.value.upper()} backend failed: {type(e).__name__}: {e}")
        raise RenderError(str(e) or type(e).__name__, fmt.value, e) from e

    return RenderedDocument(
        content=content,
        filename=f"resume-{timestamp_millis()}.{fmt.value}",
        media_type=MEDIA_TYPES[fmt],
        format=fmt.value,
        page_count=page_count(content) if fmt is OutputFormat.PDF else None,
    )


def render_resume(
    resume: ParsedResume,
    registry: TemplateRegistry,
    template_id: Optional[str] = None,
    overrides: Optional[Mapping[str, Any]] = None,
    output_format: Union[str, OutputFormat] = OutputFormat.PDF,
) -> RenderedDocument:
    """
    Render a structured resume to PDF or DOCX.

    Args:
        resume: Structured resume
        registry: Template table
        template_id: Template to use; unknown ids fall back to the default
        overrides: Caller style overrides (variant, accentColor, headerColor, font)
        output_format: "pdf" or "docx"

    Returns:
        RenderedDocument

    Raises:
        RenderError: If the format is unsupported or the backend fails
    """
    fmt = parse_output_format(output_format)
    spec, config = resolve_render_config(registry, template_id, overrides)
    log_render_start(resume.name, config.template_id, config.variant, fmt.value)

    start = time.time()
    doc_layout = layout(resume, spec, config)
    document = render_layout(doc_layout, fmt, title=resume.name)

    log_render_result(
        document.filename, len(document.content), document.page_count, time.time() - start
    )
    return document
