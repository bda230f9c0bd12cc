from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, List

from docx import Document
from docx.opc.exceptions import PackageNotFoundError
from docx.text.paragraph import Paragraph

from heading_outline.ingest.extractor import HeadingExtractor
from heading_outline.models.heading import HeadingDeclaration

_log = logging.getLogger(__name__)

_DIGITS = re.compile(r"\d+")


class DocxHeadingExtractor(HeadingExtractor):
    """Read headings from a Word document's paragraph styles (Heading1, Heading2, ...)."""

    suffixes = frozenset({".docx"})

    def extract(self, document_path: Path) -> List[HeadingDeclaration]:
        if not document_path.exists():
            raise FileNotFoundError(f"DOCX document not found: {document_path}")

        try:
            document = Document(str(document_path))
        except (PackageNotFoundError, KeyError, ValueError) as exc:
            raise ValueError(f"Could not read a Word document from {document_path}: {exc}") from exc

        return self.extract_paragraphs(document.paragraphs)

    def extract_paragraphs(self, paragraphs: Iterable[Paragraph]) -> List[HeadingDeclaration]:
        prefix = self.config.docx_style_prefix.lower()
        headings: List[HeadingDeclaration] = []

        for paragraph in paragraphs:
            style = paragraph.style
            style_id = (style.style_id if style is not None else None) or ""
            if not style_id.lower().startswith(prefix):
                continue

            digits = _DIGITS.findall(style_id)
            if not digits:
                _log.debug("Skipping heading style without a level: %s", style_id)
                continue

            text = paragraph.text
            if not text.strip():
                _log.debug("Skipping empty %s paragraph", style_id)
                continue

            headings.append(
                HeadingDeclaration(
                    text=self._clean(text),
                    level=int("".join(digits)),
                    position=len(headings),
                )
            )

        return headings


__all__ = ["DocxHeadingExtractor"]
