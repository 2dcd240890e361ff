"""Single-pass validator for Copilot instruction, prompt and chatmode files."""
from __future__ import annotations

import os
from typing import Any, Dict, List, Optional, Set, Tuple

from .checks import check_code_fences, check_filename, check_frontmatter, check_placeholders, check_urls
from .config import CATEGORY_RULES, SKIPPED_DIRECTORIES, CategoryRule
from .findings import Finding, Section, ValidationReport, error
from .frontmatter import split_frontmatter
from .profile import load_profile, normalize_profile


class _DocumentReader:
    """Reads each file once; an unreadable file is reported a single time."""

    def __init__(self, root: str) -> None:
        self.root = root
        self._texts: Dict[str, Optional[str]] = {}
        self._reasons: Dict[str, str] = {}
        self._reported: Set[str] = set()

    def read(self, rel_path: str) -> Tuple[Optional[str], List[Finding]]:
        if rel_path not in self._texts:
            full_path = os.path.join(self.root, *rel_path.split("/"))
            try:
                with open(full_path, "r", encoding="utf-8") as handle:
                    self._texts[rel_path] = handle.read()
            except (OSError, UnicodeDecodeError) as exc:
                self._texts[rel_path] = None
                self._reasons[rel_path] = getattr(exc, "strerror", None) or str(exc)
        text = self._texts[rel_path]
        if text is not None or rel_path in self._reported:
            return text, []
        self._reported.add(rel_path)
        reason = self._reasons.get(rel_path, "unknown error")
        return None, [error(rel_path, "unreadable", f"Could not read file ({reason})")]


def _relative(root: str, path: str) -> str:
    return os.path.relpath(path, root).replace(os.sep, "/")


def _list_markdown(root: str, directory: str, suffix: str = ".md") -> List[str]:
    full_dir = os.path.join(root, *directory.split("/"))
    if not os.path.isdir(full_dir):
        return []
    names = []
    for name in sorted(os.listdir(full_dir)):
        full_path = os.path.join(full_dir, name)
        if name.endswith(suffix) and os.path.isfile(full_path):
            names.append(_relative(root, full_path))
    return names


def _walk_markdown(root: str, ignore: List[str]) -> List[str]:
    found: List[str] = []
    for current, dirs, files in os.walk(root):
        dirs[:] = sorted(name for name in dirs if name not in SKIPPED_DIRECTORIES)
        for name in sorted(files):
            if not name.endswith(".md"):
                continue
            rel_path = _relative(root, os.path.join(current, name))
            if any(fragment and fragment in rel_path for fragment in ignore):
                continue
            found.append(rel_path)
    return found


def check_environment(root: str) -> None:
    missing = [
        rule.directory for rule in CATEGORY_RULES if not os.path.isdir(os.path.join(root, *rule.directory.split("/")))
    ]
    if missing:
        raise FileNotFoundError(f"Expected directories not found under {root}: {', '.join(missing)}")


def _frontmatter_section(
    root: str, rule: CategoryRule, reader: _DocumentReader, strict: bool
) -> Section:
    checked: List[str] = []
    findings: List[Finding] = []
    for rel_path in _list_markdown(root, rule.directory, rule.suffix):
        checked.append(rel_path)
        text, read_findings = reader.read(rel_path)
        findings.extend(read_findings)
        if text is None:
            continue
        findings.extend(check_frontmatter(rel_path, split_frontmatter(text), rule, strict=strict))
    return Section(
        key=rule.name,
        title=f"Checking {rule.label}...",
        icon="📋",
        checked=tuple(checked),
        findings=tuple(findings),
        success_message="Valid front matter",
        per_file_success=True,
    )


def _url_section(root: str, reader: _DocumentReader, ignore: List[str]) -> Section:
    checked = _walk_markdown(root, ignore)
    findings: List[Finding] = []
    for rel_path in checked:
        text, read_findings = reader.read(rel_path)
        findings.extend(read_findings)
        if text is None:
            continue
        findings.extend(check_urls(rel_path, text))
    return Section(
        key="urls",
        title="Checking URL consistency...",
        icon="🔗",
        checked=tuple(checked),
        findings=tuple(findings),
        success_message="No URL consistency issues found",
    )


def _naming_section(root: str, reader: _DocumentReader) -> Section:
    checked: List[str] = []
    findings: List[Finding] = []
    for rule in CATEGORY_RULES:
        for rel_path in _list_markdown(root, rule.directory):
            checked.append(rel_path)
            text, read_findings = reader.read(rel_path)
            findings.extend(read_findings)
            if text is None:
                continue
            findings.extend(check_filename(rel_path, rule))
    return Section(
        key="naming",
        title="Checking file naming conventions...",
        icon="📝",
        checked=tuple(checked),
        findings=tuple(findings),
        success_message="File naming conventions are correct",
    )


def _placeholder_section(root: str, reader: _DocumentReader, tokens: List[str]) -> Section:
    checked: List[str] = []
    findings: List[Finding] = []
    for rule in CATEGORY_RULES:
        for rel_path in _list_markdown(root, rule.directory):
            if "template" in rel_path:
                continue
            checked.append(rel_path)
            text, read_findings = reader.read(rel_path)
            findings.extend(read_findings)
            if text is None:
                continue
            findings.extend(check_placeholders(rel_path, split_frontmatter(text).body, tokens))
    return Section(
        key="placeholders",
        title="Checking for unfilled placeholders...",
        icon="🔍",
        checked=tuple(checked),
        findings=tuple(findings),
        success_message="No unfilled placeholders found",
    )


def _fence_section(root: str, reader: _DocumentReader, extra_dirs: List[str]) -> Section:
    directories = [rule.directory for rule in CATEGORY_RULES] + list(extra_dirs)
    checked: List[str] = []
    findings: List[Finding] = []
    for directory in directories:
        for rel_path in _list_markdown(root, directory):
            if rel_path in checked:
                continue
            checked.append(rel_path)
            text, read_findings = reader.read(rel_path)
            findings.extend(read_findings)
            if text is None:
                continue
            findings.extend(check_code_fences(rel_path, text))
    return Section(
        key="fences",
        title="Checking code fence consistency...",
        icon="📦",
        checked=tuple(checked),
        findings=tuple(findings),
        success_message="Code fences are properly matched",
    )


def validate(repo_root: str, profile: Optional[Dict[str, Any]] = None) -> ValidationReport:
    """Run every check against ``repo_root`` and return the full report.

    Raises ``FileNotFoundError`` before reading anything when one of the
    category directories is missing. Every other problem is a finding.
    """
    root = os.path.abspath(repo_root)
    check_environment(root)
    if profile is None:
        settings = load_profile(root)
    else:
        settings = normalize_profile(profile)
    strict = bool(settings.get("strict_schema", False))
    reader = _DocumentReader(root)

    sections: List[Section] = [_frontmatter_section(root, rule, reader, strict) for rule in CATEGORY_RULES]
    sections.append(_url_section(root, reader, list(settings["url_ignore"])))
    sections.append(_naming_section(root, reader))
    sections.append(_placeholder_section(root, reader, list(settings["placeholders"])))
    sections.append(_fence_section(root, reader, list(settings["fence_directories"])))
    return ValidationReport(root=root, sections=tuple(sections))
