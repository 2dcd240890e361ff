from copilot_lint.engine.checks import (
    check_code_fences,
    check_filename,
    check_frontmatter,
    check_placeholders,
    check_urls,
    count_code_fences,
)
from copilot_lint.engine.config import CATEGORIES
from copilot_lint.engine.frontmatter import split_frontmatter


def _messages(findings):
    return [finding.message for finding in findings]


def test_missing_frontmatter_is_single_error():
    findings = check_frontmatter("a.prompt.md", split_frontmatter("# no front matter\n"), CATEGORIES["prompt"])
    assert _messages(findings) == ["Missing front matter"]


def test_each_missing_field_is_reported():
    frontmatter = split_frontmatter("---\ndescription: demo\n---\n")
    findings = check_frontmatter("x.review.prompt.md", frontmatter, CATEGORIES["prompt"])
    assert _messages(findings) == ["Missing 'mode' field", "Missing 'tools' field"]
    assert all(finding.is_error for finding in findings)


def test_complete_instruction_frontmatter_passes():
    frontmatter = split_frontmatter("---\napplyTo: '**'\ndescription: demo\n---\nbody\n")
    assert check_frontmatter("foo.instructions.md", frontmatter, CATEGORIES["instruction"]) == []


def test_strict_mode_checks_values():
    frontmatter = split_frontmatter("---\nmode: chat\ndescription: demo\ntools: codebase\n---\n")
    findings = check_frontmatter("x.review.prompt.md", frontmatter, CATEGORIES["prompt"], strict=True)
    messages = _messages(findings)
    assert len(messages) == 2
    assert any(message.startswith("Invalid front matter (mode:") for message in messages)
    assert any(message.startswith("Invalid front matter (tools:") for message in messages)


def test_strict_mode_reports_unparsable_yaml_once():
    frontmatter = split_frontmatter("---\ndescription: [broken\ntools: []\n---\n")
    findings = check_frontmatter("x.expert.chatmode.md", frontmatter, CATEGORIES["chatmode"], strict=True)
    assert _messages(findings) == ["Invalid front matter YAML"]


def test_filename_patterns_per_category():
    assert check_filename(".github/instructions/python.instructions.md", CATEGORIES["instruction"]) == []
    assert check_filename(".github/instructions/README.md", CATEGORIES["instruction"]) == []
    assert check_filename(".github/prompts/python.azure.deploy.prompt.md", CATEGORIES["prompt"]) == []
    assert check_filename(".github/chatmodes/python.code-review.chatmode.md", CATEGORIES["chatmode"]) == []

    findings = check_filename(".github/instructions/Python-3.instructions.md", CATEGORIES["instruction"])
    assert _messages(findings) == ["Should follow pattern: {language}.instructions.md"]
    findings = check_filename(".github/prompts/review.prompt.md", CATEGORIES["prompt"])
    assert len(findings) == 1


def test_code_fences_counted_at_line_start():
    text = "```python\nx = 1\n```\n  ```indented does not count\n```\n"
    assert count_code_fences(text) == 3
    assert _messages(check_code_fences("doc.md", text)) == ["Unmatched code fences (found 3)"]
    assert check_code_fences("doc.md", "```\n```\n") == []


def test_placeholders_are_warnings():
    findings = check_placeholders("a.md", "Use {Language} {Version} here", ["{Language}", "{Version}", "{Mode}"])
    assert len(findings) == 1
    assert not findings[0].is_error
    assert findings[0].message == "Contains unfilled placeholders ({Language}, {Version})"
    assert check_placeholders("a.md", "{language} is fine", ["{Language}"]) == []


def test_url_rules():
    text = (
        "see https://github.com/o/r/blob/main/x.md\n"
        "and https://github.com/o/r/blob/master/y.md\n"
        "and [up](../z.md)\n"
        "again https://github.com/o/r/blob/main/q.md\n"
    )
    findings = check_urls("README.md", text)
    by_rule = {finding.rule: finding for finding in findings}
    assert set(by_rule) == {"url-blob-main", "url-blob-master", "url-relative"}
    assert by_rule["url-blob-main"].is_error
    assert by_rule["url-blob-main"].message.endswith("(line 1, 4)")
    assert not by_rule["url-blob-master"].is_error
    assert by_rule["url-relative"].is_error
    assert check_urls("README.md", "https://github.com/o/r/tree/master/docs\n") == []


def test_leading_bom_does_not_hide_a_fence():
    assert count_code_fences("\ufeff```\ncode\n```\n") == 2
    assert _messages(check_code_fences("doc.md", "\ufeff```\ncode\n")) == ["Unmatched code fences (found 1)"]
