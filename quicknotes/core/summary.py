from __future__ import annotations

import re

from quicknotes.settings import SUMMARY_MAX_LEN

# ASCII whitespace only; no-break and other Unicode spaces are kept as text
WHITESPACE_RE = re.compile(r"\s+", re.ASCII)


def summarize(content: str, *, max_len: int = SUMMARY_MAX_LEN) -> str:
    """
    Display text for a note: its first two lines joined, whitespace collapsed,
    cut to ``max_len`` characters.

    Missing lines count as empty. Trailing whitespace left by the cut is
    dropped, so ``summarize(summarize(x)) == summarize(x)``.
    """
    lines = (content or "").split("\n")
    first = lines[0]
    second = lines[1] if len(lines) > 1 else ""

    s = WHITESPACE_RE.sub(" ", f"{first} {second}").strip(" ")
    if len(s) > max_len:
        s = s[:max_len].rstrip(" ")
    return s
