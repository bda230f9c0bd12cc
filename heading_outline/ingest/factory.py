from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Type

from heading_outline.ingest.docx import DocxHeadingExtractor
from heading_outline.ingest.extractor import HeadingExtractor
from heading_outline.ingest.markdown import MarkdownHeadingExtractor
from heading_outline.ingest.pdf import PdfOutlineExtractor
from heading_outline.models.configs import ExtractorConfig


@dataclass(slots=True)
class ExtractorSpec:
    name: str
    cls: Type[HeadingExtractor]


_EXTRACTORS: Dict[str, ExtractorSpec] = {
    "markdown": ExtractorSpec(name="markdown", cls=MarkdownHeadingExtractor),
    "docx": ExtractorSpec(name="docx", cls=DocxHeadingExtractor),
    "pdf": ExtractorSpec(name="pdf", cls=PdfOutlineExtractor),
}


def extractor_choices() -> Mapping[str, ExtractorSpec]:
    return _EXTRACTORS


def supported_suffixes() -> frozenset[str]:
    suffixes: set[str] = set()
    for spec in _EXTRACTORS.values():
        suffixes.update(spec.cls.suffixes)
    return frozenset(suffixes)


def create_extractor(path: Path, config: ExtractorConfig | None = None) -> HeadingExtractor:
    suffix = path.suffix.lower()
    for spec in _EXTRACTORS.values():
        if suffix in spec.cls.suffixes:
            return spec.cls(config)
    raise ValueError(f"Unsupported document format '{suffix}' for {path}")


__all__ = ["ExtractorSpec", "create_extractor", "extractor_choices", "supported_suffixes"]
