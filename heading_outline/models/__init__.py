from .configs import CheckerConfig, ExtractorConfig, FailurePolicy, OutlineConfig
from .heading import ActiveHeading, HeadingDeclaration, HeadingNode, HeadingStructure

__all__ = [
    "ActiveHeading",
    "CheckerConfig",
    "ExtractorConfig",
    "FailurePolicy",
    "HeadingDeclaration",
    "HeadingNode",
    "HeadingStructure",
    "OutlineConfig",
]
