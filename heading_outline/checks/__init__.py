from .heading_checker import HeadingIssue, HeadingStructureChecker, OutlineReport

__all__ = ["HeadingIssue", "HeadingStructureChecker", "OutlineReport"]
