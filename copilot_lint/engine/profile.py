"""Validator profile loader for placeholder, fence and URL settings."""
from __future__ import annotations

import os
from typing import Any, Dict, List, Optional

try:
    import yaml  # type: ignore
except Exception as exc:
    raise RuntimeError("PyYAML is required to load validator profiles.") from exc

try:
    from jsonschema import Draft202012Validator  # type: ignore
except Exception as exc:
    raise RuntimeError("jsonschema is required to validate validator profiles.") from exc

from .checks import load_schema
from .config import (
    DEFAULT_FENCE_DIRECTORIES,
    DEFAULT_PLACEHOLDERS,
    DEFAULT_URL_IGNORE,
    PROFILE_ENV_VAR,
    PROFILE_RELATIVE_PATH,
)


def default_profile() -> Dict[str, Any]:
    return {
        "version": 1,
        "placeholders": list(DEFAULT_PLACEHOLDERS),
        "fence_directories": list(DEFAULT_FENCE_DIRECTORIES),
        "url_ignore": list(DEFAULT_URL_IGNORE),
        "strict_schema": False,
    }


def resolve_profile_path(repo_root: str) -> str:
    override = os.getenv(PROFILE_ENV_VAR, "").strip()
    if override:
        return override if os.path.isabs(override) else os.path.join(repo_root, override)
    return os.path.join(repo_root, *PROFILE_RELATIVE_PATH.split("/"))


def _as_list(value: Any, fallback: List[str]) -> List[str]:
    if value is None:
        return list(fallback)
    if isinstance(value, list):
        return [str(item) for item in value]
    return [str(value)]


def _error_details(error: Any) -> str:
    path = ".".join(str(part) for part in error.absolute_path) or "<root>"
    return f"{path}: {error.message}"


def profile_errors(doc: Dict[str, Any]) -> List[str]:
    validator = Draft202012Validator(load_schema("profile"))
    errors = sorted(validator.iter_errors(doc), key=lambda item: list(item.path))
    return [_error_details(error) for error in errors]


def normalize_profile(doc: Dict[str, Any], source: str = "profile") -> Dict[str, Any]:
    """Check ``doc`` against the profile schema and overlay it on the defaults.

    Raises ``ValueError`` naming the first violations, so a quoted
    ``"false"`` never reaches the validator as a truthy string.
    """
    errors = profile_errors(doc)
    if errors:
        raise ValueError(f"{source}: invalid profile: {'; '.join(errors[:3])}")
    merged = default_profile()
    for key, value in doc.items():
        merged[key] = value
    merged["placeholders"] = _as_list(merged.get("placeholders"), DEFAULT_PLACEHOLDERS)
    merged["fence_directories"] = _as_list(merged.get("fence_directories"), DEFAULT_FENCE_DIRECTORIES)
    merged["url_ignore"] = _as_list(merged.get("url_ignore"), DEFAULT_URL_IGNORE)
    return merged


def load_profile(repo_root: str, path: Optional[str] = None) -> Dict[str, Any]:
    """Return the default profile overlaid with the repository's YAML profile.

    A missing file or a file whose top level is not a mapping leaves the
    defaults untouched. YAML syntax errors and schema violations propagate
    as ``ValueError``.
    """
    path = path or resolve_profile_path(repo_root)
    if not os.path.isfile(path):
        return default_profile()
    with open(path, "r", encoding="utf-8") as handle:
        try:
            doc = yaml.safe_load(handle)
        except yaml.YAMLError as exc:
            raise ValueError(f"{path}: profile is not valid YAML: {exc}") from exc
    if not isinstance(doc, dict):
        return default_profile()
    return normalize_profile(doc, source=path)
