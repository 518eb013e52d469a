"""Unit tests for format-specific text extraction."""

import io

import docx
import pytest

from refit.contexts.intake import text_extractor
from refit.contexts.intake.exceptions import ExtractionError, UnsupportedFormatError
from refit.contexts.intake.format_detector import DocumentFormat, RawDocument
from refit.contexts.intake.text_extractor import extract_document, extract_text


@pytest.mark.unit
def test_txt_is_decoded_verbatim():
    """Plain text comes back unchanged, blank lines included."""
    text = "Jane Doe\n\nSKILLS\nPython, SQL\n"
    assert extract_text(text.encode("utf-8"), "txt") == text


@pytest.mark.unit
def test_txt_accepts_filename_as_format():
    """The format argument may be a filename."""
    assert extract_text("Zoë".encode("utf-8"), "cv.TXT") == "Zoë"


@pytest.mark.unit
def test_txt_invalid_utf8_raises_extraction_error():
    """Undecodable bytes raise ExtractionError, not UnicodeDecodeError."""
    with pytest.raises(ExtractionError) as exc_info:
        extract_text(b"\xff\xfe\xfa", DocumentFormat.TXT)

    assert exc_info.value.format == "txt"
    assert exc_info.value.user_message == "could not read this file"
    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


@pytest.mark.unit
@pytest.mark.parametrize("fmt", ["pdf", "docx", "doc"])
def test_corrupt_documents_raise_extraction_error(fmt):
    """Garbage bytes for binary formats raise ExtractionError tagged with the format."""
    with pytest.raises(ExtractionError) as exc_info:
        extract_text(b"this is not a real document", fmt)

    assert exc_info.value.format == fmt
    assert exc_info.value.__cause__ is not None


@pytest.mark.unit
def test_unsupported_format_never_reaches_a_decoder(monkeypatch):
    """Unsupported extensions fail before any decoder runs."""
    calls = []
    monkeypatch.setattr(
        text_extractor,
        "DECODERS",
        {fmt: (lambda buffer: calls.append(buffer)) for fmt in DocumentFormat},
    )

    with pytest.raises(UnsupportedFormatError):
        extract_text(b"data", "image.png")

    assert calls == []


@pytest.mark.unit
def test_extract_document_tags_filename_on_failure():
    """Errors from extract_document carry the upload's declared name."""
    document = RawDocument(buffer=b"broken", format=DocumentFormat.PDF, name="cv.pdf")

    with pytest.raises(ExtractionError) as exc_info:
        extract_document(document)

    assert exc_info.value.filename == "cv.pdf"


def _docx_bytes(document) -> bytes:
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


class TestWordTables:
    """Tests for table text in Word documents."""

    @pytest.mark.unit
    def test_table_cells_in_document_order(self):
        """Cell text is read where the table sits between body paragraphs."""
        document = docx.Document()
        document.add_paragraph("Resume")
        table = document.add_table(rows=2, cols=1)
        table.cell(0, 0).text = "Jane Doe"
        table.cell(1, 0).text = "EXPERIENCE"
        document.add_paragraph("Engineer")

        assert extract_text(_docx_bytes(document), "docx") == "Resume\nJane Doe\nEXPERIENCE\nEngineer"

    @pytest.mark.unit
    def test_table_rows_read_left_to_right(self):
        document = docx.Document()
        table = document.add_table(rows=2, cols=2)
        table.cell(0, 0).text = "Jane Doe"
        table.cell(0, 1).text = "jane@example.com"
        table.cell(1, 0).text = "SKILLS"
        table.cell(1, 1).text = "Python, SQL"

        assert extract_text(_docx_bytes(document), "docx").splitlines() == [
            "Jane Doe",
            "jane@example.com",
            "SKILLS",
            "Python, SQL",
        ]

    @pytest.mark.unit
    def test_merged_cell_text_appears_once(self):
        document = docx.Document()
        table = document.add_table(rows=1, cols=2)
        merged = table.cell(0, 0).merge(table.cell(0, 1))
        merged.text = "Jane Doe"

        assert extract_text(_docx_bytes(document), "docx").count("Jane Doe") == 1

    @pytest.mark.unit
    def test_nested_table_text(self):
        document = docx.Document()
        outer = document.add_table(rows=1, cols=1).cell(0, 0)
        outer.text = "EDUCATION"
        outer.add_table(rows=1, cols=1).cell(0, 0).text = "B.S. Computer Science"

        lines = extract_text(_docx_bytes(document), "docx").splitlines()

        assert lines[0] == "EDUCATION"
        assert "B.S. Computer Science" in lines
