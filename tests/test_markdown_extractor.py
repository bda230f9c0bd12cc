from pathlib import Path

import pytest

from heading_outline.ingest.markdown import MarkdownHeadingExtractor
from heading_outline.models.configs import ExtractorConfig


def test_markdown_extractor_reads_headings_in_order(tmp_path):
    doc_path = tmp_path / "sample.md"
    doc_path.write_text(
        "# Doc Title\n\nIntro text.\n\n## Section One\n\nParagraph one.\n\n### Subsection  \n\nDetails here.\n",
        encoding="utf-8",
    )

    headings = MarkdownHeadingExtractor().extract(Path(doc_path))

    assert [(h.text, h.level, h.position) for h in headings] == [
        ("Doc Title", 1, 0),
        ("Section One", 2, 1),
        ("Subsection", 3, 2),
    ]


def test_markdown_extractor_ignores_fenced_code():
    text = "# Doc\n\n```bash\n# not a heading\n```\n\n## Usage\n"

    headings = MarkdownHeadingExtractor().extract_text(text)

    assert [h.text for h in headings] == ["Doc", "Usage"]


def test_markdown_extractor_can_include_fenced_code():
    text = "# Doc\n```\n# inside\n```\n"
    extractor = MarkdownHeadingExtractor(ExtractorConfig(markdown_skip_code_blocks=False))

    headings = extractor.extract_text(text)

    assert [h.text for h in headings] == ["Doc", "inside"]


def test_markdown_extractor_keeps_deep_levels_unclamped():
    headings = MarkdownHeadingExtractor().extract_text("####### Seven\n")

    assert headings[0].level == 7


def test_markdown_extractor_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        MarkdownHeadingExtractor().extract(tmp_path / "missing.md")


def test_markdown_fence_closes_only_on_matching_marker():
    text = (
        "# Doc\n"
        "````markdown\n"
        "~~~\n"
        "# still code\n"
        "```\n"
        "## also code\n"
        "````\n"
        "## After\n"
    )

    headings = MarkdownHeadingExtractor().extract_text(text)

    assert [h.text for h in headings] == ["Doc", "After"]
