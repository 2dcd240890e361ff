"""Validate the repository's copilot-lint profile against its schema."""
from __future__ import annotations

import argparse
import os
import sys
from typing import List, Optional

try:
    import yaml  # type: ignore
except Exception as exc:
    raise RuntimeError("PyYAML is required to validate the profile.") from exc

PACKAGE_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
if PACKAGE_ROOT not in sys.path:
    sys.path.insert(0, PACKAGE_ROOT)

from copilot_lint.engine.profile import profile_errors, resolve_profile_path  # noqa: E402


def validate_profile_file(profile_path: str) -> List[str]:
    if not os.path.isfile(profile_path):
        return []
    with open(profile_path, "r", encoding="utf-8") as handle:
        try:
            profile = yaml.safe_load(handle)
        except yaml.YAMLError as exc:
            return [f"profile is not valid YAML: {exc}"]
    if profile is None:
        return []
    if not isinstance(profile, dict):
        return ["profile must be a top-level mapping/object"]
    return profile_errors(profile)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Validate the copilot-lint profile")
    parser.add_argument("--repo", default=os.getcwd(), help="Repository root holding the profile.")
    args = parser.parse_args(argv)

    profile_path = resolve_profile_path(os.path.abspath(args.repo))
    if not os.path.isfile(profile_path):
        print(f"No profile at {profile_path}; defaults apply.")
        return 0
    errors = validate_profile_file(profile_path)
    if errors:
        for err in errors[:5]:
            print(f"FAIL {err} in {profile_path}")
        print(f"\n{len(errors)} profile validation error(s) found.")
        return 1
    print("Profile passed validation.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
