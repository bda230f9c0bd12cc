"""Append-only outline builder and its error taxonomy."""

from .errors import (
    DuplicateRootError,
    EmptyTreeError,
    FirstHeadingMustBeLevelOneError,
    HeadingErrorCode,
    InvalidLevelError,
    OutlineError,
    UnreachableLevelError,
)
from .tree import InsertOutcome, OutlineState, OutlineTree

__all__ = [
    "DuplicateRootError",
    "EmptyTreeError",
    "FirstHeadingMustBeLevelOneError",
    "HeadingErrorCode",
    "InsertOutcome",
    "InvalidLevelError",
    "OutlineError",
    "OutlineState",
    "OutlineTree",
    "UnreachableLevelError",
]
