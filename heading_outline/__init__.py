"""Heading outline reconstruction and structure checking."""

from .models.heading import ActiveHeading, HeadingDeclaration, HeadingNode, HeadingStructure
from .outline.tree import InsertOutcome, OutlineState, OutlineTree

__all__ = [
    "ActiveHeading",
    "HeadingDeclaration",
    "HeadingNode",
    "HeadingStructure",
    "InsertOutcome",
    "OutlineState",
    "OutlineTree",
]
