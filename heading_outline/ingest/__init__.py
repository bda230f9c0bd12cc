"""Extractors producing ordered heading declarations from documents."""

from .extractor import HeadingExtractor
from .markdown import MarkdownHeadingExtractor
from .docx import DocxHeadingExtractor
from .pdf import PdfOutlineExtractor
from .factory import create_extractor, extractor_choices, supported_suffixes

__all__ = [
    "HeadingExtractor",
    "MarkdownHeadingExtractor",
    "DocxHeadingExtractor",
    "PdfOutlineExtractor",
    "create_extractor",
    "extractor_choices",
    "supported_suffixes",
]
