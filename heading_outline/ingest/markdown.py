from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List

from heading_outline.ingest.extractor import HeadingExtractor
from heading_outline.models.heading import HeadingDeclaration

_log = logging.getLogger(__name__)

_HEADING_PATTERN = re.compile(r"^(?P<hashes>#+)\s+(?P<title>.+?)\s*$")
_FENCE_PATTERN = re.compile(r"^\s{0,3}(?P<fence>`{3,}|~{3,})(?P<info>.*)$")


def _closes(opening: str, fence: re.Match[str]) -> bool:
    """A bare fence of the opening character, at least as long, ends the block."""

    marker = fence.group("fence")
    return marker[0] == opening[0] and len(marker) >= len(opening) and not fence.group("info").strip()


class MarkdownHeadingExtractor(HeadingExtractor):
    """Read ATX headings (#, ##, ###, ...) from markdown files."""

    suffixes = frozenset({".md", ".markdown"})

    def extract(self, document_path: Path) -> List[HeadingDeclaration]:
        if not document_path.exists():
            raise FileNotFoundError(f"Markdown document not found: {document_path}")
        return self.extract_text(document_path.read_text(encoding="utf-8"))

    def extract_text(self, text: str) -> List[HeadingDeclaration]:
        headings: List[HeadingDeclaration] = []
        open_fence: str | None = None

        for line in text.splitlines():
            if self.config.markdown_skip_code_blocks:
                fence = _FENCE_PATTERN.match(line)
                if open_fence is not None:
                    if fence and _closes(open_fence, fence):
                        open_fence = None
                    continue
                if fence:
                    open_fence = fence.group("fence")
                    continue

            match = _HEADING_PATTERN.match(line)
            if not match:
                continue

            title = self._clean(match.group("title"))
            if not title.strip():
                _log.debug("Skipping empty markdown heading: %r", line)
                continue
            headings.append(
                HeadingDeclaration(
                    text=title,
                    level=len(match.group("hashes")),
                    position=len(headings),
                )
            )

        return headings


__all__ = ["MarkdownHeadingExtractor"]
