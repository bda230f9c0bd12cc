from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from heading_outline.models.configs import CheckerConfig, FailurePolicy
from heading_outline.models.heading import ActiveHeading, HeadingDeclaration, HeadingStructure
from heading_outline.outline.errors import EmptyTreeError, HeadingErrorCode, OutlineError
from heading_outline.outline.tree import OutlineTree

_log = logging.getLogger(__name__)


@dataclass(slots=True)
class HeadingIssue:
    """A heading that could not be placed in the outline."""

    code: HeadingErrorCode
    message: str
    text: Optional[str] = None
    level: Optional[int] = None
    position: Optional[int] = None

    @classmethod
    def from_error(cls, error: OutlineError, declaration: HeadingDeclaration) -> "HeadingIssue":
        return cls(
            code=error.error_code,
            message=error.message,
            text=declaration.text,
            level=declaration.level,
            position=declaration.position,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code.value,
            "message": self.message,
            "text": self.text,
            "level": self.level,
            "position": self.position,
        }


@dataclass(slots=True)
class OutlineReport:
    """Outcome of checking the heading structure of one document."""

    document_id: str
    heading_count: int
    accepted_count: int
    issues: List[HeadingIssue] = field(default_factory=list)
    structure: Optional[HeadingStructure] = None
    active_heading: Optional[ActiveHeading] = None

    @property
    def passed(self) -> bool:
        return not self.issues

    def to_dict(self) -> Dict[str, Any]:
        return {
            "document_id": self.document_id,
            "passed": self.passed,
            "heading_count": self.heading_count,
            "accepted_count": self.accepted_count,
            "issues": [issue.to_dict() for issue in self.issues],
            "structure": self.structure.to_dict() if self.structure else None,
            "active_heading": (
                {"text": self.active_heading.text, "level": self.active_heading.level}
                if self.active_heading
                else None
            ),
        }


class HeadingStructureChecker:
    """Replay a document's headings into an outline and record structure violations."""

    def __init__(self, config: CheckerConfig | None = None) -> None:
        self.config = config or CheckerConfig()

    def check(
        self,
        declarations: Iterable[HeadingDeclaration],
        *,
        document_id: str = "document",
    ) -> OutlineReport:
        tree = OutlineTree()
        issues: List[HeadingIssue] = []
        seen = 0

        for declaration in declarations:
            seen += 1
            outcome = tree.try_insert(declaration.text, declaration.level)
            if outcome.error is None:
                continue
            issue = HeadingIssue.from_error(outcome.error, declaration)
            issues.append(issue)
            _log.debug("%s: heading %d rejected (%s)", document_id, declaration.position, issue.code.value)
            if self.config.failure_policy == FailurePolicy.ABORT:
                break

        if seen == 0:
            issues.append(
                HeadingIssue(code=HeadingErrorCode.EMPTY_TREE, message=EmptyTreeError().message)
            )

        report = OutlineReport(
            document_id=document_id,
            heading_count=seen,
            accepted_count=len(tree),
            issues=issues,
        )
        if len(tree):
            report.active_heading = tree.get_active_heading()
            if self.config.include_structure:
                report.structure = tree.export_structure()

        _log.info(
            "Checked %s: %d headings, %d accepted, %d issues",
            document_id,
            report.heading_count,
            report.accepted_count,
            len(report.issues),
        )
        return report


__all__ = ["HeadingIssue", "HeadingStructureChecker", "OutlineReport"]
