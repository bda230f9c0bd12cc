from __future__ import annotations

import logging
from pathlib import Path
from typing import List

import fitz  # type: ignore

from heading_outline.ingest.extractor import HeadingExtractor
from heading_outline.models.heading import HeadingDeclaration

_log = logging.getLogger(__name__)


class PdfOutlineExtractor(HeadingExtractor):
    """Read headings from a PDF's outline (bookmarks) using PyMuPDF."""

    suffixes = frozenset({".pdf"})

    def extract(self, document_path: Path) -> List[HeadingDeclaration]:
        if not document_path.exists():
            raise FileNotFoundError(f"PDF document not found: {document_path}")

        with fitz.open(document_path) as pdf:
            toc = pdf.get_toc()

        if not toc:
            _log.warning("No outline found in %s; no headings extracted", document_path)
            return []

        headings: List[HeadingDeclaration] = []
        for entry in toc:
            if len(entry) < 3:
                continue
            level_raw, title_raw, page_raw = entry[:3]
            try:
                level = int(level_raw)
            except (TypeError, ValueError):
                _log.debug("Skipping outline entry with invalid level: %r", entry)
                continue

            title = self._clean(str(title_raw))
            if not title.strip():
                continue

            try:
                page = int(page_raw)
            except (TypeError, ValueError):
                page = None

            headings.append(
                HeadingDeclaration(text=title, level=level, position=len(headings), page=page)
            )

        return headings


__all__ = ["PdfOutlineExtractor"]
