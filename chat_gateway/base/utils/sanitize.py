"""Response sanitizer for model output.

Some provider families wrap JSON replies in a markdown code block even when
told not to. ``sanitize`` removes that wrapper and nothing else: it does not
parse or validate JSON.
"""
from __future__ import annotations

import re

_FENCE = "```"
# Opening fence line: backticks, optional language tag (usually json), newline.
_OPENING_FENCE = re.compile(r"^```[\w+-]*[ \t]*\r?\n?")
_CLOSING_FENCE = re.compile(r"\r?\n?```\s*$")


def sanitize(text: str) -> str:
    """Strip a surrounding markdown fence from ``text``.

    Applies only when ``text`` starts with a triple-backtick fence (optionally
    tagged ``json``): the opening fence line and a trailing closing fence are
    removed. Text that does not start with a fence is returned unchanged.

    Nested outer fences are peeled until the text no longer starts with one,
    so the result never starts with a fence and a second call is a no-op.
    Inner content is preserved byte for byte.

    Examples:
        >>> sanitize('```json\\n{"a":1}\\n```')
        '{"a":1}'
        >>> sanitize('plain')
        'plain'
    """
    if not text.startswith(_FENCE):
        return text
    inner = _OPENING_FENCE.sub("", text, count=1)
    inner = _CLOSING_FENCE.sub("", inner, count=1)
    if inner.startswith(_FENCE):
        return sanitize(inner)
    return inner


__all__ = ["sanitize"]
