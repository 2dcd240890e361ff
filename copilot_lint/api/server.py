"""HTTP API for validating a repository checkout."""
from __future__ import annotations

import os
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from copilot_lint.engine.profile import load_profile
from copilot_lint.engine.reporting import report_payload
from copilot_lint.engine.validator import validate


class ValidateRequest(BaseModel):
    repo_root: Optional[str] = Field(default=None)
    strict: bool = Field(default=False)


def _repo_root() -> str:
    return os.getenv("REPO_ROOT", os.getcwd())


app = FastAPI(title="copilot-lint", version="0.1.0")


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.post("/validate")
def run(payload: ValidateRequest) -> Dict[str, Any]:
    repo_root = os.path.abspath(payload.repo_root or _repo_root())
    try:
        profile = load_profile(repo_root)
        if payload.strict:
            profile["strict_schema"] = True
        report = validate(repo_root, profile)
    except (OSError, ValueError) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return report_payload(report)
