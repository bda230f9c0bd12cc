from __future__ import annotations

import os
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class FailurePolicy(str, Enum):
    ABORT = "abort"
    SKIP = "skip"


class ExtractorConfig(BaseModel):
    docx_style_prefix: str = "heading"
    markdown_skip_code_blocks: bool = True
    strip_text: bool = True


class CheckerConfig(BaseModel):
    failure_policy: FailurePolicy = Field(
        default_factory=lambda: os.getenv("HEADING_FAILURE_POLICY", FailurePolicy.ABORT.value)
    )
    include_structure: bool = True

    model_config = {
        "validate_default": True,
    }

    @field_validator("failure_policy", mode="before")
    @classmethod
    def _normalize_policy(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value


class OutlineConfig(BaseModel):
    extractor: ExtractorConfig = Field(default_factory=ExtractorConfig)
    checker: CheckerConfig = Field(default_factory=CheckerConfig)
    pattern: str = "**/*.md"
    output: Path | None = Field(default=None, description="Optional JSON report path")

    def resolve_paths(self, base_path: Path) -> "OutlineConfig":
        values = self.model_dump()
        raw = values.get("output")
        if raw is not None:
            values["output"] = (base_path / raw).resolve() if not Path(raw).is_absolute() else Path(raw)
        return OutlineConfig.model_validate(values)


__all__ = ["CheckerConfig", "ExtractorConfig", "FailurePolicy", "OutlineConfig"]
