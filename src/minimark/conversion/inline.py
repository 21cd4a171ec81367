from __future__ import annotations

import re
from typing import List, Tuple


LINE_BREAK_RE = re.compile(r"\\\\")
BOLD_RE = re.compile(r"\*\*(.*?)\*\*")
ITALIC_RE = re.compile(r"//(.*?)//")
UNDERLINE_RE = re.compile(r"__(.*?)__")
CODE_RE = re.compile(r"~~(.*?)~~")
MDASH = "&mdash;"

INLINE_RULES: List[Tuple["re.Pattern[str]", str]] = [
    (LINE_BREAK_RE, "<br/>"),
    (BOLD_RE, r"<b>\1</b>"),
    (ITALIC_RE, r"<em>\1</em>"),
    (UNDERLINE_RE, r"<u>\1</u>"),
    (CODE_RE, r"<code>\1</code>"),
]


def sanitize(text: str) -> str:
    """Escape ``&`` and ``<`` so later emitted tags are never escaped."""
    return text.replace("&", "&amp;").replace("<", "&lt;")


def replace_dashes(line: str) -> str:
    """Turn ``x--y`` into ``x&mdash;y`` when both neighbours are not hyphens.

    Each replacement consumes its two neighbours, so ``a--b--c`` only
    yields one dash and runs of three or more hyphens are left alone.
    """
    out: List[str] = []
    idx = 0
    length = len(line)
    while idx < length:
        char = line[idx]
        if (
            idx + 3 < length
            and char != "-"
            and line[idx + 1] == "-"
            and line[idx + 2] == "-"
            and line[idx + 3] != "-"
        ):
            out.append(char + MDASH + line[idx + 3])
            idx += 4
            continue
        out.append(char)
        idx += 1
    return "".join(out)


def transform_line(line: str) -> str:
    line = line.rstrip()
    for pattern, replacement in INLINE_RULES:
        line = pattern.sub(replacement, line)
    return replace_dashes(line)


def transform_text(text: str) -> str:
    return "\n".join(transform_line(line) for line in text.split("\n"))
