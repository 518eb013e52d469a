"""
REFIT - Resume Extraction, Formatting, and Intelligent Templating

The document core of a resume-optimization service: turns uploaded resumes and job
postings into structured records, and turns structured resumes back into paginated
PDF/DOCX documents.

Architecture:
- Intake Context: Format detection, text extraction, section segmentation, field extraction
- Templating Context: Template table, render configuration, layout and pagination
- Rendering Context: PDF and DOCX backends, rendered document lifecycle
"""

__version__ = "0.1.0"
