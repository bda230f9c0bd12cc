from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from dotenv import load_dotenv

from heading_outline.models.configs import FailurePolicy
from heading_outline.orchestration import (
    check_documents,
    discover_documents,
    load_outline_config,
    write_summary,
)


def parse_args() -> argparse.Namespace:
    if Path(".env").exists():
        load_dotenv(".env", override=False)
    parser = argparse.ArgumentParser(description="Check the heading structure of documents.")
    parser.add_argument("input", type=Path, help="Document or directory of documents to check")
    parser.add_argument(
        "--pattern",
        default=None,
        help="Glob pattern used when the input is a directory (default: from config, **/*.md).",
    )
    parser.add_argument("--config", type=Path, default=None, help="Optional YAML/TOML/JSON config file")
    parser.add_argument(
        "--policy",
        choices=[policy.value for policy in FailurePolicy],
        default=None,
        help="Stop at the first structure issue (abort) or skip malformed headings (skip).",
    )
    parser.add_argument("--output", type=Path, default=None, help="Write the JSON report to this path")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    if not args.input.exists():
        raise FileNotFoundError(f"Input path not found: {args.input}")

    config = load_outline_config(args.config)
    if args.policy:
        config.checker.failure_policy = FailurePolicy(args.policy)

    root: Path | None = None
    if args.input.is_file():
        documents: List[Path] = [args.input]
    else:
        root = args.input
        documents = discover_documents(args.input, args.pattern or config.pattern)
    if not documents:
        raise RuntimeError("No documents found to check")

    summary = check_documents(documents, config, root=root)
    output = args.output or config.output
    if output:
        write_summary(summary, output)

    for report in summary.reports:
        status = "PASS" if report.passed else "FAIL"
        print(f"[{status}] {report.document_id}")
        for issue in report.issues:
            print(f"    {issue.code.value} (heading {issue.position}): {issue.message}")

    print(
        "Heading check complete",
        {
            "documents": summary.documents_checked,
            "passed": summary.documents_passed,
            "failed": summary.documents_failed,
            "report": str(output) if output else None,
        },
    )
    return 0 if summary.documents_failed == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
