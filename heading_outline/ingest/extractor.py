from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import ClassVar, FrozenSet, Iterable, Iterator, List

from heading_outline.models.configs import ExtractorConfig
from heading_outline.models.heading import HeadingDeclaration


class HeadingExtractor(ABC):
    """Abstract base class for reading ordered heading declarations from documents."""

    suffixes: ClassVar[FrozenSet[str]] = frozenset()

    def __init__(self, config: ExtractorConfig | None = None) -> None:
        self.config = config or ExtractorConfig()

    def supports(self, path: Path) -> bool:
        return path.suffix.lower() in self.suffixes

    @abstractmethod
    def extract(self, document_path: Path) -> List[HeadingDeclaration]:
        """Return the document's headings in document order."""

    def extract_many(self, paths: Iterable[Path]) -> Iterator[List[HeadingDeclaration]]:
        for path in paths:
            yield self.extract(path)

    def _clean(self, text: str) -> str:
        return text.strip() if self.config.strip_text else text


__all__ = ["HeadingExtractor"]
