"""
Section segmentation for extracted resume text.

A single top-to-bottom scan keeps a "current section" cursor. Header lines switch
the cursor and flush the previous section to its field processor; other lines are
accumulated for the active section, or (before any section) considered as the
candidate job title.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional

from refit.contexts.intake.field_extractor import apply_section, extract_email, extract_phone
from refit.contexts.intake.logger import _log_debug, log_segmentation_result
from refit.contexts.intake.resume_data_structure import ParsedResume
from refit.contexts.intake.section_patterns import SectionHeaderMatcher

# Title candidates are only taken from the top of the document, name line included
TITLE_SCAN_LINES = 5
MAX_TITLE_LENGTH = 50


@dataclass(frozen=True)
class ResumeLine:
    """A trimmed, non-empty line and whether a blank line preceded it."""

    text: str
    after_blank: bool = False


def iter_lines(text: str) -> Iterator[ResumeLine]:
    """
    Yield non-empty trimmed lines, remembering paragraph breaks.

    Blank lines are dropped, but the next kept line is flagged so section
    accumulators can restore the break between entries. Leading and trailing
    blank lines have no effect.
    """
    pending_blank = False
    seen_any = False
    for raw in text.split("\n"):
        line = raw.strip()
        if not line:
            pending_blank = seen_any
            continue
        yield ResumeLine(line, after_blank=pending_blank)
        pending_blank = False
        seen_any = True


class SectionSegmenter:
    """
    Splits resume text into sections and fills a ParsedResume.

    Args:
        matcher: Header classification strategy (default: keyword table)
    """

    def __init__(self, matcher: Optional[SectionHeaderMatcher] = None):
        self.matcher = matcher or SectionHeaderMatcher()

    def segment(self, text: str) -> ParsedResume:
        """
        Segment extracted text into a structured resume.

        Args:
            text: Extracted plain text

        Returns:
            ParsedResume. A document without any recognized header yields only
            its name plus document-wide email/phone.
        """
        resume = ParsedResume(email=extract_email(text), phone=extract_phone(text))
        lines = list(iter_lines(text))
        if not lines:
            return resume

        resume.name = lines[0].text

        current_section: Optional[str] = None
        accumulator: List[str] = []
        header_seen = False

        for index, line in enumerate(lines):
            section = self.matcher.match(line.text)

            if section:
                self._flush(resume, current_section, accumulator)
                _log_debug(f"Header {line.text!r} -> {section}")
                current_section = section
                accumulator = []
                header_seen = True
            elif current_section:
                if line.after_blank and accumulator:
                    accumulator.append("")
                accumulator.append(line.text)
            elif (
                index < TITLE_SCAN_LINES
                and not resume.title
                and len(line.text) < MAX_TITLE_LENGTH
            ):
                resume.title = line.text

        self._flush(resume, current_section, accumulator)

        if not header_seen:
            resume.title = ""

        log_segmentation_result(resume)
        return resume

    @staticmethod
    def _flush(resume: ParsedResume, section: Optional[str], accumulator: List[str]) -> None:
        if section and accumulator:
            apply_section(resume, section, "\n".join(accumulator))
