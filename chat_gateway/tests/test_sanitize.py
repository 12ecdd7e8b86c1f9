from __future__ import annotations

import pytest

from chat_gateway.base.utils import sanitize


def test_fenced_json_example():
    assert sanitize('```json\n{"a":1}\n```') == '{"a":1}'  # nosec B101


def test_untagged_fence():
    assert sanitize("```\n[1, 2]\n```") == "[1, 2]"  # nosec B101


def test_unfenced_text_unchanged():
    text = 'Here is JSON: ```json\n{"a":1}\n```'
    assert sanitize(text) == text  # nosec B101
    assert sanitize("") == ""  # nosec B101


def test_missing_closing_fence():
    assert sanitize('```json\n{"a":1}') == '{"a":1}'  # nosec B101


def test_inner_content_preserved():
    inner = '{\n  "code": "x = `y`"\n}'
    assert sanitize(f"```json\n{inner}\n```") == inner  # nosec B101


@pytest.mark.parametrize(
    "text",
    [
        '```json\n{"a":1}\n```',
        "```\n```json\n{}\n```\n```",
        "plain",
        "```",
        "```json\n```\n",
        '  ```json\n{"a":1}\n```',
        "```python\nprint(1)\n```\n",
    ],
)
def test_idempotent(text):
    once = sanitize(text)
    assert sanitize(once) == once  # nosec B101


def test_not_a_json_validator():
    assert sanitize("```json\nnot json at all\n```") == "not json at all"  # nosec B101
