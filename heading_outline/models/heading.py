from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple


@dataclass(slots=True, frozen=True)
class HeadingNode:
    """A heading stored in the outline arena.

    ``parent`` and ``children`` hold arena indices rather than node references;
    the owning ``OutlineTree`` resolves them.
    """

    index: int
    text: str
    level: int
    parent: Optional[int] = None
    children: Tuple[int, ...] = ()

    @property
    def is_root(self) -> bool:
        return self.parent is None


@dataclass(slots=True, frozen=True)
class ActiveHeading:
    text: str
    level: int


@dataclass(slots=True, frozen=True, eq=False)
class HeadingStructure:
    """Read-only snapshot of a heading and its descendants.

    Equality and dict conversion walk the snapshot with an explicit stack, so
    arbitrarily deep outlines compare and serialize without recursion.
    """

    text: str
    level: int
    children: Tuple["HeadingStructure", ...] = ()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HeadingStructure):
            return NotImplemented
        pending = [(self, other)]
        while pending:
            left, right = pending.pop()
            if left is right:
                continue
            if (
                left.text != right.text
                or left.level != right.level
                or len(left.children) != len(right.children)
            ):
                return False
            pending.extend(zip(left.children, right.children))
        return True

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"text": self.text, "level": self.level, "children": []}
        pending = [(self, result)]
        while pending:
            node, out = pending.pop()
            for child in node.children:
                child_out = {"text": child.text, "level": child.level, "children": []}
                out["children"].append(child_out)
                pending.append((child, child_out))
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "HeadingStructure":
        # Breadth-first flatten; every child lands after its parent, so building
        # in reverse order always finds the children already constructed.
        flat: List[Mapping[str, Any]] = [data]
        child_ids: List[List[int]] = []
        position = 0
        while position < len(flat):
            ids: List[int] = []
            for child in flat[position].get("children", []):
                ids.append(len(flat))
                flat.append(child)
            child_ids.append(ids)
            position += 1

        built: List[Optional[HeadingStructure]] = [None] * len(flat)
        for index in range(len(flat) - 1, -1, -1):
            mapping = flat[index]
            built[index] = cls(
                text=str(mapping["text"]),
                level=int(mapping["level"]),
                children=tuple(built[child] for child in child_ids[index]),  # type: ignore[misc]
            )
        result = built[0]
        assert result is not None
        return result


@dataclass(slots=True, frozen=True)
class HeadingDeclaration:
    """A heading as it appears in the source document, in document order."""

    text: str
    level: int
    position: int = 0
    page: Optional[int] = None


__all__ = ["ActiveHeading", "HeadingDeclaration", "HeadingNode", "HeadingStructure"]
