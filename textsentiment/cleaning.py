from __future__ import annotations

import re

# Deletes rather than replaces with a space, so "can't" collapses to "cant".
_NON_ALPHA_RE = re.compile(r"[^a-zA-Z\s]+")


def normalize_text(text: str | None) -> str:
    if text is None:
        return ""
    return _NON_ALPHA_RE.sub("", str(text))
