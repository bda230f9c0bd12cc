from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterator, List, Optional

from heading_outline.models.heading import ActiveHeading, HeadingNode, HeadingStructure
from heading_outline.outline.errors import (
    DuplicateRootError,
    EmptyTreeError,
    FirstHeadingMustBeLevelOneError,
    InvalidLevelError,
    OutlineError,
    UnreachableLevelError,
)

_log = logging.getLogger(__name__)


class OutlineState(str, Enum):
    EMPTY = "empty"
    POPULATED = "populated"


@dataclass(slots=True, frozen=True)
class InsertOutcome:
    """Result of a single insertion attempt: either the new node or the error."""

    node: Optional[HeadingNode] = None
    error: Optional[OutlineError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class OutlineTree:
    """Append-only heading tree built from headings fed in document order.

    Nodes live in an arena and reference each other by index. The active cursor
    points at the most recently accepted heading and is where the search for the
    next attachment point starts.
    """

    def __init__(self) -> None:
        self._nodes: List[HeadingNode] = []
        self._cursor: Optional[int] = None

    # ------------------------------------------------------------------ queries
    @property
    def state(self) -> OutlineState:
        return OutlineState.POPULATED if self._nodes else OutlineState.EMPTY

    @property
    def root(self) -> Optional[HeadingNode]:
        return self._nodes[0] if self._nodes else None

    @property
    def active(self) -> Optional[HeadingNode]:
        return self._nodes[self._cursor] if self._cursor is not None else None

    def node(self, index: int) -> HeadingNode:
        return self._nodes[index]

    def parent_of(self, node: HeadingNode) -> Optional[HeadingNode]:
        return self._nodes[node.parent] if node.parent is not None else None

    def children_of(self, node: HeadingNode) -> List[HeadingNode]:
        return [self._nodes[index] for index in node.children]

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[HeadingNode]:
        # Arena order is insertion order, which is document order.
        return iter(list(self._nodes))

    def get_active_heading(self) -> ActiveHeading:
        active = self.active
        if active is None:
            raise EmptyTreeError()
        return ActiveHeading(text=active.text, level=active.level)

    def export_structure(self) -> HeadingStructure:
        if not self._nodes:
            raise EmptyTreeError("Cannot export the structure of an empty outline")
        return self._snapshot()

    def render(self) -> str:
        """Return an indented ``Level N: text`` listing of the outline."""

        root = self.root
        if root is None:
            return ""

        lines: List[str] = []
        pending = [(root, 0)]
        while pending:
            node, depth = pending.pop()
            lines.append(f"{'  ' * depth}Level {node.level}: {node.text}")
            for child in reversed(self.children_of(node)):
                pending.append((child, depth + 1))
        return "\n".join(lines) + "\n"

    # ------------------------------------------------------------------ mutation
    def insert(self, text: str, level: int) -> HeadingNode:
        """Insert a heading, raising the matching ``OutlineError`` on failure."""

        outcome = self.try_insert(text, level)
        if outcome.error is not None:
            raise outcome.error
        assert outcome.node is not None
        return outcome.node

    def try_insert(self, text: str, level: int) -> InsertOutcome:
        """Insert a heading and report failure as a value instead of raising.

        The tree and cursor are only modified when the outcome is ``ok``.
        """

        if isinstance(level, bool) or not isinstance(level, int) or level < 1:
            return self._reject(InvalidLevelError(level, text=text))

        if not self._nodes:
            if level != 1:
                return self._reject(FirstHeadingMustBeLevelOneError(level, text=text))
            return self._accept(text, level, parent=None)

        if level == 1:
            return self._reject(DuplicateRootError(text=text))

        parent = self._find_parent(level)
        if parent is None:
            active = self.active
            assert active is not None
            return self._reject(UnreachableLevelError(level, active.level, text=text))
        return self._accept(text, level, parent=parent.index)

    # ------------------------------------------------------------------ helpers
    def _find_parent(self, level: int) -> Optional[HeadingNode]:
        candidate = self.active
        while candidate is not None:
            if level == candidate.level + 1:
                return candidate
            if level == candidate.level and candidate.parent is not None:
                return self._nodes[candidate.parent]
            candidate = self.parent_of(candidate)
        return None

    def _accept(self, text: str, level: int, *, parent: Optional[int]) -> InsertOutcome:
        node = HeadingNode(index=len(self._nodes), text=text, level=level, parent=parent)
        self._nodes.append(node)
        if parent is not None:
            # Nodes are frozen; the parent record is swapped for one listing the new child.
            owner = self._nodes[parent]
            self._nodes[parent] = replace(owner, children=owner.children + (node.index,))
        self._cursor = node.index
        _log.debug("Accepted level %d heading %r at index %d", level, text, node.index)
        return InsertOutcome(node=node)

    def _reject(self, error: OutlineError) -> InsertOutcome:
        _log.debug("Rejected heading %r: %s", error.text, error.message)
        return InsertOutcome(error=error)

    def _snapshot(self) -> HeadingStructure:
        # Children always sit at higher arena indices than their parent, so a
        # reverse pass builds every subtree before the heading that owns it.
        built: List[Optional[HeadingStructure]] = [None] * len(self._nodes)
        for node in reversed(self._nodes):
            built[node.index] = HeadingStructure(
                text=node.text,
                level=node.level,
                children=tuple(built[child] for child in node.children),  # type: ignore[misc]
            )
        root = built[0]
        assert root is not None
        return root


__all__ = ["InsertOutcome", "OutlineState", "OutlineTree"]
