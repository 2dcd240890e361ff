"""Individual per-file checks. Each returns the findings it produced."""
from __future__ import annotations

import json
import os
from typing import Any, Dict, List, Sequence

try:
    from jsonschema import Draft202012Validator  # type: ignore
except Exception as exc:
    raise RuntimeError("jsonschema is required to validate front matter.") from exc

from .config import CODE_FENCE, NAMING_EXEMPT_FILES, URL_RULES, CategoryRule
from .findings import Finding, error, warning
from .frontmatter import FrontMatter, load_frontmatter_mapping

SCHEMA_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "schemas")

_SCHEMA_CACHE: Dict[str, Dict[str, Any]] = {}


def load_schema(name: str) -> Dict[str, Any]:
    if name not in _SCHEMA_CACHE:
        path = os.path.join(SCHEMA_DIR, f"{name}.schema.json")
        with open(path, "r", encoding="utf-8") as handle:
            _SCHEMA_CACHE[name] = json.load(handle)
    return _SCHEMA_CACHE[name]


def _error_details(error_obj: Any) -> str:
    path = ".".join(str(part) for part in error_obj.absolute_path) or "<root>"
    return f"{path}: {error_obj.message}"


def check_frontmatter(path: str, frontmatter: FrontMatter, rule: CategoryRule, strict: bool = False) -> List[Finding]:
    if not frontmatter.present:
        return [error(path, "frontmatter-missing", "Missing front matter")]
    if not frontmatter.closed:
        return [error(path, "frontmatter-unterminated", "Unterminated front matter")]

    findings: List[Finding] = []
    for field in rule.required_fields:
        if not frontmatter.has_field(field):
            findings.append(error(path, "frontmatter-field", f"Missing '{field}' field"))
    if strict:
        findings.extend(_check_schema(path, frontmatter, rule))
    return findings


def _check_schema(path: str, frontmatter: FrontMatter, rule: CategoryRule) -> List[Finding]:
    try:
        mapping = load_frontmatter_mapping(frontmatter.raw)
    except ValueError:
        return [error(path, "frontmatter-schema", "Invalid front matter YAML")]
    validator = Draft202012Validator(load_schema(rule.name))
    schema_errors = sorted(validator.iter_errors(mapping), key=lambda item: list(item.path))
    return [
        error(path, "frontmatter-schema", f"Invalid front matter ({_error_details(item)})")
        for item in schema_errors
    ]


def check_filename(path: str, rule: CategoryRule) -> List[Finding]:
    basename = os.path.basename(path)
    if basename in NAMING_EXEMPT_FILES or rule.matches_filename(basename):
        return []
    return [error(path, "naming", f"Should follow pattern: {rule.filename_hint}")]


def count_code_fences(text: str) -> int:
    if text.startswith("\ufeff"):
        text = text[1:]
    return sum(1 for line in text.splitlines() if line.startswith(CODE_FENCE))


def check_code_fences(path: str, text: str) -> List[Finding]:
    count = count_code_fences(text)
    if count % 2 == 0:
        return []
    return [error(path, "code-fence", f"Unmatched code fences (found {count})")]


def find_placeholders(body: str, tokens: Sequence[str]) -> List[str]:
    return [token for token in tokens if token in body]


def check_placeholders(path: str, body: str, tokens: Sequence[str]) -> List[Finding]:
    found = find_placeholders(body, tokens)
    if not found:
        return []
    return [warning(path, "placeholder", f"Contains unfilled placeholders ({', '.join(found)})")]


def check_urls(path: str, text: str) -> List[Finding]:
    lines = text.splitlines()
    findings: List[Finding] = []
    for rule_id, needle, severity, message in URL_RULES:
        hits = [str(number) for number, line in enumerate(lines, start=1) if needle in line]
        if not hits:
            continue
        detail = f"{message} (line {', '.join(hits)})"
        if severity == "error":
            findings.append(error(path, rule_id, detail))
        else:
            findings.append(warning(path, rule_id, detail))
    return findings
