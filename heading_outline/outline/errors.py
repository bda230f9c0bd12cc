from __future__ import annotations

from enum import Enum
from typing import Optional


class HeadingErrorCode(str, Enum):
    INVALID_LEVEL = "invalid_level"
    FIRST_HEADING_NOT_LEVEL_ONE = "first_heading_not_level_one"
    DUPLICATE_ROOT = "duplicate_root"
    UNREACHABLE_LEVEL = "unreachable_level"
    EMPTY_TREE = "empty_tree"


class OutlineError(Exception):
    """Base class for recoverable outline validation failures."""

    error_code: HeadingErrorCode

    def __init__(self, message: str, *, text: Optional[str] = None, level: object = None) -> None:
        super().__init__(message)
        self.message = message
        self.text = text
        self.level = level


class InvalidLevelError(OutlineError):
    error_code = HeadingErrorCode.INVALID_LEVEL

    def __init__(self, level: object, *, text: Optional[str] = None) -> None:
        super().__init__(
            f"Invalid heading level: {level!r}. Level must be an integer of 1 or greater.",
            text=text,
            level=level,
        )


class FirstHeadingMustBeLevelOneError(OutlineError):
    error_code = HeadingErrorCode.FIRST_HEADING_NOT_LEVEL_ONE

    def __init__(self, level: int, *, text: Optional[str] = None) -> None:
        super().__init__(
            f"First heading in the document must be level 1 (got level {level})",
            text=text,
            level=level,
        )


class DuplicateRootError(OutlineError):
    error_code = HeadingErrorCode.DUPLICATE_ROOT

    def __init__(self, *, text: Optional[str] = None) -> None:
        super().__init__("Cannot add another level 1 heading", text=text, level=1)


class UnreachableLevelError(OutlineError):
    error_code = HeadingErrorCode.UNREACHABLE_LEVEL

    def __init__(self, level: int, active_level: int, *, text: Optional[str] = None) -> None:
        super().__init__(
            f"Cannot add heading level {level} at any valid position in hierarchy "
            f"(active heading is level {active_level})",
            text=text,
            level=level,
        )
        self.active_level = active_level


class EmptyTreeError(OutlineError):
    error_code = HeadingErrorCode.EMPTY_TREE

    def __init__(self, message: str = "Outline is empty: no heading has been inserted yet") -> None:
        super().__init__(message)


__all__ = [
    "DuplicateRootError",
    "EmptyTreeError",
    "FirstHeadingMustBeLevelOneError",
    "HeadingErrorCode",
    "InvalidLevelError",
    "OutlineError",
    "UnreachableLevelError",
]
