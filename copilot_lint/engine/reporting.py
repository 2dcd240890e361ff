"""Terminal and JSON renderings of a validation report."""
from __future__ import annotations

from typing import Any, Dict, List

from .findings import Finding, Section, ValidationReport

RULE = "═══════════════════════════════════════"


def format_finding(finding: Finding) -> str:
    if finding.is_error:
        return f"❌ ERROR: {finding.describe()}"
    return f"⚠️  WARNING: {finding.describe()}"


def _section_lines(section: Section) -> List[str]:
    lines = [f"{section.icon} {section.title}"]
    lines.extend(format_finding(finding) for finding in section.findings)
    if section.per_file_success:
        for path in section.clean_files():
            lines.append(f"✅ {path}: {section.success_message}")
    elif section.error_count == 0 and section.success_message:
        lines.append(f"✅ {section.success_message}")
    lines.append("")
    return lines


def render_text(report: ValidationReport) -> List[str]:
    lines = ["🔍 Validating GitHub Copilot customization files...", ""]
    for section in report.sections:
        lines.extend(_section_lines(section))
    lines.append(RULE)
    if report.passed:
        lines.append("✅ All validation checks passed!")
        lines.append(RULE)
        return lines
    lines.append(f"❌ Validation failed with {report.error_count} error(s)")
    lines.append(RULE)
    lines.append("")
    lines.append("Please fix the errors above before submitting.")
    lines.append("See CONTRIBUTING.md for guidelines.")
    return lines


def _finding_payload(finding: Finding) -> Dict[str, str]:
    return {
        "path": finding.path,
        "rule": finding.rule,
        "severity": finding.severity,
        "message": finding.message,
    }


def report_payload(report: ValidationReport) -> Dict[str, Any]:
    return {
        "root": report.root,
        "passed": report.passed,
        "error_count": report.error_count,
        "warning_count": report.warning_count,
        "sections": [
            {
                "key": section.key,
                "title": section.title,
                "checked": list(section.checked),
                "findings": [_finding_payload(finding) for finding in section.findings],
            }
            for section in report.sections
        ],
    }
