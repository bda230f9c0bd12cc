"""Wiring of extractors, checker and configuration for batch runs."""

from .config_loader import load_outline_config
from .runner import CheckSummary, check_document, check_documents, discover_documents, write_summary

__all__ = [
    "CheckSummary",
    "check_document",
    "check_documents",
    "discover_documents",
    "load_outline_config",
    "write_summary",
]
