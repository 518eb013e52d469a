"""
Intake Context

Responsibilities:
- Detects document formats and applies upload checks
- Extracts plain text from PDF, DOC/DOCX and TXT uploads
- Segments resume text into sections and extracts structured fields
- Parses job postings heuristically

Owns: Document decoding, resume structure extraction
Never: Makes layout or styling decisions
"""

from refit.contexts.intake.exceptions import (
    ExtractionError,
    IngestionError,
    UnsupportedFormatError,
    UploadTooLargeError,
)
from refit.contexts.intake.format_detector import (
    DocumentFormat,
    RawDocument,
    detect_format,
    validate_upload,
)
from refit.contexts.intake.job_parser import JobPosting, parse_job_buffer, parse_job_text
from refit.contexts.intake.resume_data_structure import (
    EducationEntry,
    ExperienceEntry,
    IngestionResult,
    ParsedResume,
)
from refit.contexts.intake.resume_parser import (
    parse_resume_buffer,
    parse_resume_file,
    parse_resume_text,
    parse_upload,
)
from refit.contexts.intake.text_extractor import extract_text

__all__ = [
    # Errors
    "IngestionError",
    "UnsupportedFormatError",
    "ExtractionError",
    "UploadTooLargeError",
    # Format detection
    "DocumentFormat",
    "RawDocument",
    "detect_format",
    "validate_upload",
    "extract_text",
    # Data structures
    "ParsedResume",
    "ExperienceEntry",
    "EducationEntry",
    "IngestionResult",
    "JobPosting",
    # Orchestrators
    "parse_resume_text",
    "parse_resume_buffer",
    "parse_resume_file",
    "parse_upload",
    "parse_job_text",
    "parse_job_buffer",
]
