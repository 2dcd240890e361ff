"""Findings, report sections and the aggregate validation report."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

ERROR = "error"
WARNING = "warning"


@dataclass(frozen=True)
class Finding:
    path: str
    rule: str
    severity: str
    message: str

    @property
    def is_error(self) -> bool:
        return self.severity == ERROR

    def describe(self) -> str:
        if self.path:
            return f"{self.path}: {self.message}"
        return self.message


def error(path: str, rule: str, message: str) -> Finding:
    return Finding(path=path, rule=rule, severity=ERROR, message=message)


def warning(path: str, rule: str, message: str) -> Finding:
    return Finding(path=path, rule=rule, severity=WARNING, message=message)


@dataclass(frozen=True)
class Section:
    key: str
    title: str
    icon: str
    checked: Tuple[str, ...] = ()
    findings: Tuple[Finding, ...] = ()
    success_message: str = ""
    # Front-matter sections print one success line per clean file.
    per_file_success: bool = False

    @property
    def error_count(self) -> int:
        return sum(1 for finding in self.findings if finding.is_error)

    def clean_files(self) -> Tuple[str, ...]:
        flagged = {finding.path for finding in self.findings}
        return tuple(path for path in self.checked if path not in flagged)


@dataclass(frozen=True)
class ValidationReport:
    root: str
    sections: Tuple[Section, ...] = ()

    @property
    def findings(self) -> Tuple[Finding, ...]:
        return tuple(finding for section in self.sections for finding in section.findings)

    @property
    def errors(self) -> Tuple[Finding, ...]:
        return tuple(finding for finding in self.findings if finding.is_error)

    @property
    def warnings(self) -> Tuple[Finding, ...]:
        return tuple(finding for finding in self.findings if not finding.is_error)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    @property
    def passed(self) -> bool:
        return self.error_count == 0

    @property
    def exit_code(self) -> int:
        return 0 if self.passed else 1

    def section(self, key: str) -> Section:
        for section in self.sections:
            if section.key == key:
                return section
        raise KeyError(key)

    def findings_for(self, path: str) -> Tuple[Finding, ...]:
        return tuple(finding for finding in self.findings if finding.path == path)
