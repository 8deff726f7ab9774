"""Shared helpers for CSS assertions."""

from __future__ import annotations

import re
from typing import List

_COMMENT = re.compile(r"/\*.*?\*/", re.S)
_RULE = re.compile(r"([^{}]+)\{([^{}]*)\}")


def rules(css: str) -> List[tuple]:
    """Return (selector, declarations) pairs with whitespace normalised.

    Only flat stylesheets are supported; good enough to compare a source with
    its minified form.
    """
    css = _COMMENT.sub("", css)
    out = []
    for selector, body in _RULE.findall(css):
        sel = re.sub(r"\s*,\s*", ",", " ".join(selector.split()))
        decls = tuple(
            re.sub(r"\s*:\s*", ":", " ".join(d.split()), count=1)
            for d in body.split(";")
            if d.strip()
        )
        out.append((sel, decls))
    return out
