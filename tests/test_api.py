from fastapi.testclient import TestClient

from copilot_lint.api.server import app

client = TestClient(app)


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_validate_reports_findings(make_repo, good_files):
    good_files[".github/instructions/python.instructions.md"] = "---\ndescription: d\n---\n"
    root = make_repo(good_files)
    response = client.post("/validate", json={"repo_root": root})
    assert response.status_code == 200
    payload = response.json()
    assert payload["passed"] is False
    assert payload["error_count"] == 1
    section = [item for item in payload["sections"] if item["key"] == "instruction"][0]
    assert section["findings"][0]["message"] == "Missing 'applyTo' field"


def test_validate_uses_repo_root_env(make_repo, good_files, monkeypatch):
    monkeypatch.setenv("REPO_ROOT", make_repo(good_files))
    response = client.post("/validate", json={})
    assert response.status_code == 200
    assert response.json()["passed"] is True


def test_validate_missing_directories(make_repo):
    response = client.post("/validate", json={"repo_root": make_repo(with_dirs=False)})
    assert response.status_code == 400
    assert "Expected directories not found" in response.json()["detail"]


def test_validate_invalid_profile(make_repo, good_files):
    good_files[".github/copilot-lint.yaml"] = "fence_directories: 3\n"
    response = client.post("/validate", json={"repo_root": make_repo(good_files)})
    assert response.status_code == 400
    assert "fence_directories" in response.json()["detail"]
