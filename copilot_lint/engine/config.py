"""Shared configuration for the customization file validator."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, List, Pattern, Tuple


@dataclass(frozen=True)
class CategoryRule:
    name: str
    label: str
    directory: str
    suffix: str
    required_fields: Tuple[str, ...]
    filename_pattern: Pattern[str]
    filename_hint: str

    def matches_filename(self, filename: str) -> bool:
        return bool(self.filename_pattern.match(filename))


CATEGORY_RULES: Tuple[CategoryRule, ...] = (
    CategoryRule(
        name="instruction",
        label="instruction files",
        directory=".github/instructions",
        suffix=".instructions.md",
        required_fields=("applyTo", "description"),
        filename_pattern=re.compile(r"^[a-z]+\.instructions\.md$"),
        filename_hint="{language}.instructions.md",
    ),
    CategoryRule(
        name="prompt",
        label="prompt files",
        directory=".github/prompts",
        suffix=".prompt.md",
        required_fields=("mode", "description", "tools"),
        filename_pattern=re.compile(r"^[a-z]+\.[a-z.-]+\.prompt\.md$"),
        filename_hint="{scope}.{purpose}.prompt.md or {scope}.{platform}.{purpose}.prompt.md",
    ),
    CategoryRule(
        name="chatmode",
        label="chatmode files",
        directory=".github/chatmodes",
        suffix=".chatmode.md",
        required_fields=("description", "tools"),
        filename_pattern=re.compile(r"^[a-z]+\.[a-z-]+\.chatmode\.md$"),
        filename_hint="{language}.{mode}.chatmode.md",
    ),
)

CATEGORIES: Dict[str, CategoryRule] = {rule.name: rule for rule in CATEGORY_RULES}

NAMING_EXEMPT_FILES = {"README.md"}

DEFAULT_PLACEHOLDERS: List[str] = ["{Language}", "{Version}", "{Purpose}", "{Mode}", "{extension}"]

DEFAULT_FENCE_DIRECTORIES: List[str] = ["docs"]

DEFAULT_URL_IGNORE: List[str] = []

SKIPPED_DIRECTORIES = {".git"}

FRONTMATTER_DELIMITER = "---"
CODE_FENCE = "```"

# (rule id, substring, severity, message)
URL_RULES: Tuple[Tuple[str, str, str, str], ...] = (
    ("url-blob-main", "blob/main", "error", "Found 'blob/main' URLs. Should use 'tree/master'"),
    (
        "url-blob-master",
        "blob/master",
        "warning",
        "Found 'blob/master' URLs. Consider using 'tree/master' for directory links",
    ),
    ("url-relative", "](../", "error", "Found relative links. Should use full GitHub URLs"),
)

PROFILE_RELATIVE_PATH = ".github/copilot-lint.yaml"
PROFILE_ENV_VAR = "COPILOT_LINT_PROFILE"
