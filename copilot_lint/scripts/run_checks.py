"""Run the profile check and the file validator from one command."""
from __future__ import annotations

import argparse
import os
import subprocess
import sys
from typing import List, Optional, Tuple


def build_commands(repo_root: str, strict: bool = False) -> List[Tuple[str, List[str]]]:
    files_cmd = [sys.executable, "-m", "copilot_lint.scripts.validate_files", "--repo", repo_root]
    if strict:
        files_cmd.append("--strict")
    return [
        ("profile", [sys.executable, "-m", "copilot_lint.scripts.validate_profile", "--repo", repo_root]),
        ("files", files_cmd),
    ]


def _run(name: str, cmd: List[str], repo_root: str) -> bool:
    print(f"==> [{name}] {' '.join(cmd)}")
    return subprocess.run(cmd, cwd=repo_root, check=False).returncode == 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run copilot-lint checks")
    parser.add_argument("--repo", default=os.getcwd(), help="Repository root to check.")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Validate front matter values against the bundled JSON schemas.",
    )
    args = parser.parse_args(argv)

    repo_root = os.path.abspath(args.repo)
    failed = [name for name, cmd in build_commands(repo_root, args.strict) if not _run(name, cmd, repo_root)]
    if failed:
        print(f"\nChecks failed: {', '.join(failed)}.")
        return 1

    print("\nAll checks passed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
