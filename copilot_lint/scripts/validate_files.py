"""Validate GitHub Copilot customization files in a repository."""
from __future__ import annotations

import argparse
import json
import os
import sys
from typing import List, Optional

PACKAGE_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
if PACKAGE_ROOT not in sys.path:
    sys.path.insert(0, PACKAGE_ROOT)

from copilot_lint.engine.profile import load_profile  # noqa: E402
from copilot_lint.engine.reporting import render_text, report_payload  # noqa: E402
from copilot_lint.engine.validator import validate  # noqa: E402

ENVIRONMENT_ERROR_EXIT = 2


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Validate GitHub Copilot customization files")
    parser.add_argument(
        "--repo",
        default=os.getcwd(),
        help="Repository root to validate (defaults to the current directory).",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format for the report.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Also validate front matter values against the bundled JSON schemas.",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _parser().parse_args(argv)
    repo_root = os.path.abspath(args.repo)
    try:
        profile = load_profile(repo_root)
        if args.strict:
            profile["strict_schema"] = True
        report = validate(repo_root, profile)
    except (OSError, ValueError) as exc:
        print(f"❌ ENVIRONMENT ERROR: {exc}")
        return ENVIRONMENT_ERROR_EXIT

    if args.format == "json":
        print(json.dumps(report_payload(report), indent=2, ensure_ascii=False))
    else:
        for line in render_text(report):
            print(line)
    return report.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
