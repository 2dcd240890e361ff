"""Pytest fixtures that build throwaway customization repositories."""
from __future__ import annotations

import os
from typing import Callable, Dict, Optional

import pytest

GOOD_INSTRUCTION = """---
applyTo: "**/*.py"
description: Python coding standards
---
# Python

Use type hints.
"""

GOOD_PROMPT = """---
mode: agent
description: Review Python code
tools: ['codebase', 'search']
---
Review the selected code.
"""

GOOD_CHATMODE = """---
description: Python expert
tools: ['codebase']
---
You are a Python expert.

```python
print("hello")
```
"""


@pytest.fixture(autouse=True)
def _no_profile_override(monkeypatch):
    monkeypatch.delenv("COPILOT_LINT_PROFILE", raising=False)


@pytest.fixture
def make_repo(tmp_path) -> Callable[..., str]:
    """Create ``.github/{instructions,prompts,chatmodes}`` plus the given files."""

    def _make(files: Optional[Dict[str, str]] = None, with_dirs: bool = True) -> str:
        if with_dirs:
            for name in ("instructions", "prompts", "chatmodes"):
                os.makedirs(tmp_path / ".github" / name, exist_ok=True)
        for rel_path, content in (files or {}).items():
            target = tmp_path / rel_path
            os.makedirs(target.parent, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return str(tmp_path)

    return _make


@pytest.fixture
def good_files() -> Dict[str, str]:
    return {
        ".github/instructions/python.instructions.md": GOOD_INSTRUCTION,
        ".github/prompts/python.review.prompt.md": GOOD_PROMPT,
        ".github/chatmodes/python.expert.chatmode.md": GOOD_CHATMODE,
    }
