"""Front-matter splitting and parsing for Markdown customization files."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List

try:
    import yaml  # type: ignore
except Exception as exc:
    raise RuntimeError("PyYAML is required to parse markdown frontmatter.") from exc

from .config import FRONTMATTER_DELIMITER

_KEY_LINE = re.compile(r"^([A-Za-z_][A-Za-z0-9_-]*):")


@dataclass(frozen=True)
class FrontMatter:
    present: bool
    closed: bool = False
    keys: List[str] = field(default_factory=list)
    raw: str = ""
    body: str = ""
    body_start_line: int = 1

    def has_field(self, name: str) -> bool:
        return name in self.keys


def _is_delimiter(line: str) -> bool:
    return line.rstrip() == FRONTMATTER_DELIMITER


def split_frontmatter(text: str) -> FrontMatter:
    """Split ``text`` into its front-matter block and body.

    The block exists only when the very first line is ``---``. It runs up to
    the next ``---`` line; when that line never comes the block is reported
    as unclosed and the body is empty.
    """
    if text.startswith("\ufeff"):
        text = text[1:]
    lines = text.splitlines()
    if not lines or not _is_delimiter(lines[0]):
        return FrontMatter(present=False, body=text)

    block: List[str] = []
    for index, line in enumerate(lines[1:], start=1):
        if _is_delimiter(line):
            body_lines = lines[index + 1 :]
            return FrontMatter(
                present=True,
                closed=True,
                keys=_top_level_keys(block),
                raw="\n".join(block),
                body="\n".join(body_lines),
                body_start_line=index + 2,
            )
        block.append(line)

    return FrontMatter(
        present=True,
        closed=False,
        keys=_top_level_keys(block),
        raw="\n".join(block),
        body="",
        body_start_line=len(lines) + 1,
    )


def _top_level_keys(block: List[str]) -> List[str]:
    keys: List[str] = []
    for line in block:
        match = _KEY_LINE.match(line)
        if match and match.group(1) not in keys:
            keys.append(match.group(1))
    return keys


def load_frontmatter_mapping(raw: str) -> Dict[str, Any]:
    try:
        parsed = yaml.safe_load(raw) if raw.strip() else {}
    except yaml.YAMLError as exc:
        raise ValueError(f"front matter is not valid YAML: {exc}") from exc
    if not isinstance(parsed, dict):
        raise ValueError("front matter must be a top-level mapping/object")
    return parsed
