"""CSS syntax checking and minification.

Minification is delegated to rcssmin. rcssmin never rejects input, so each
stylesheet first goes through ``check_syntax``, a single pass over the text
that tracks comments, strings and bracket nesting. It is not a CSS parser: it
only catches structural damage that would make the minified output differ in
meaning from the source (unclosed blocks, stray closers, unterminated strings
or comments, and rules that never open a block).
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

import rcssmin

from .models import CssParseError

_PAIRS = {"}": "{", ")": "(", "]": "["}
_OPENERS = set(_PAIRS.values())


def check_syntax(text: str, path: Path | str = "<string>") -> None:
    """Raise CssParseError if ``text`` is structurally broken."""

    stack: List[Tuple[str, int]] = []
    line = 1
    i = 0
    n = len(text)
    # Top-level text seen since the last rule, block or ';' (for error checks)
    pending = ""
    pending_line = 1

    while i < n:
        ch = text[i]

        if ch == "\n":
            line += 1
            if not stack and pending:
                pending += ch
            i += 1
            continue

        if ch == "/" and text.startswith("/*", i):
            end = text.find("*/", i + 2)
            if end == -1:
                raise CssParseError(path, line, "unterminated comment")
            line += text.count("\n", i, end)
            i = end + 2
            continue

        if ch in ("'", '"'):
            start_line = line
            i += 1
            while True:
                if i >= n:
                    raise CssParseError(path, start_line, "unterminated string")
                c = text[i]
                if c == "\\":
                    if i + 1 < n and text[i + 1] == "\n":
                        line += 1
                    i += 2
                    continue
                if c == "\n":
                    raise CssParseError(path, start_line, "unterminated string")
                i += 1
                if c == ch:
                    break
            if not stack:
                pending += "s"
            continue

        if ch == "\\":
            # Escaped code point in an identifier; skip the escaped char.
            if i + 1 < n and text[i + 1] == "\n":
                line += 1
            if not stack:
                pending += text[i : i + 2]
            i += 2
            continue

        if ch in _OPENERS:
            if ch == "{" and not stack:
                if not pending.strip():
                    raise CssParseError(path, line, "block without a selector")
                pending = ""
            stack.append((ch, line))
            i += 1
            continue

        if ch in _PAIRS:
            if not stack:
                raise CssParseError(path, line, f"unexpected '{ch}'")
            opener, opened_at = stack.pop()
            if opener != _PAIRS[ch]:
                raise CssParseError(
                    path, line, f"'{ch}' does not close '{opener}' from line {opened_at}"
                )
            i += 1
            continue

        if not stack:
            if ch == ";":
                statement = pending.strip()
                if statement and not statement.startswith("@"):
                    raise CssParseError(
                        path, pending_line, "declaration outside of a rule"
                    )
                pending = ""
            elif not ch.isspace():
                if not pending.strip():
                    pending_line = line
                pending += ch
            elif pending:
                pending += ch
        i += 1

    if stack:
        opener, opened_at = stack[-1]
        raise CssParseError(path, opened_at, f"'{opener}' is never closed")
    if pending.strip():
        raise CssParseError(path, pending_line, "expected '{' after selector")


def minify_css(text: str, keep_bang_comments: bool = True) -> str:
    """Strip whitespace and comments while keeping the rules intact.

    ``/*! ... */`` comments survive by default, matching what most CSS
    minifiers do for license headers.
    """

    return rcssmin.cssmin(text, keep_bang_comments=keep_bang_comments)


def minify_file(source: Path, keep_bang_comments: bool = True) -> str:
    """Read, check and minify a single stylesheet.

    OSError from reading propagates; callers wrap it.
    """

    text = source.read_text(encoding="utf-8-sig")
    check_syntax(text, source)
    return minify_css(text, keep_bang_comments=keep_bang_comments)


__all__ = ["check_syntax", "minify_css", "minify_file"]
