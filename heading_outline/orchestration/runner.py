from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List

from heading_outline.checks.heading_checker import HeadingStructureChecker, OutlineReport
from heading_outline.ingest.factory import create_extractor, supported_suffixes
from heading_outline.models.configs import OutlineConfig

_log = logging.getLogger(__name__)


@dataclass(slots=True)
class CheckSummary:
    """Aggregates per-document reports from a checking run."""

    reports: List[OutlineReport] = field(default_factory=list)

    @property
    def documents_checked(self) -> int:
        return len(self.reports)

    @property
    def documents_passed(self) -> int:
        return sum(1 for report in self.reports if report.passed)

    @property
    def documents_failed(self) -> int:
        return self.documents_checked - self.documents_passed

    def to_dict(self) -> Dict[str, Any]:
        return {
            "documents": self.documents_checked,
            "passed": self.documents_passed,
            "failed": self.documents_failed,
            "reports": [report.to_dict() for report in self.reports],
        }


def discover_documents(root: Path, pattern: str) -> List[Path]:
    suffixes = supported_suffixes()
    return sorted(
        path for path in root.glob(pattern) if path.is_file() and path.suffix.lower() in suffixes
    )


def check_document(
    path: Path,
    config: OutlineConfig | None = None,
    *,
    document_id: str | None = None,
) -> OutlineReport:
    config = config or OutlineConfig()
    extractor = create_extractor(path, config.extractor)
    declarations = extractor.extract(path)
    checker = HeadingStructureChecker(config.checker)
    return checker.check(declarations, document_id=document_id or path.stem)


def check_documents(
    paths: Iterable[Path],
    config: OutlineConfig | None = None,
    *,
    root: Path | None = None,
) -> CheckSummary:
    """Check every document; report ids are paths relative to ``root``.

    Without ``root``, several documents are keyed relative to their common
    directory so that same-named files in different folders stay distinct.
    """

    config = config or OutlineConfig()
    documents = list(paths)
    if root is None and len(documents) > 1:
        root = Path(os.path.commonpath([path.parent for path in documents]))

    summary = CheckSummary()
    for path in documents:
        document_id = path.relative_to(root).as_posix() if root is not None else None
        summary.reports.append(check_document(path, config, document_id=document_id))
    _log.info(
        "Checked %d documents: %d passed, %d failed",
        summary.documents_checked,
        summary.documents_passed,
        summary.documents_failed,
    )
    return summary


def write_summary(summary: CheckSummary, output: Path) -> Path:
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json.dumps(summary.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")
    return output


__all__ = ["CheckSummary", "check_document", "check_documents", "discover_documents", "write_summary"]
