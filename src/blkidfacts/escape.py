"""
Escaping for the colon-delimited tags list.

A device's attribute names are published as one string, joined with ":".
Names may themselves contain ":" or "\\", so both are escaped with a
backslash before joining. split_tags() is the exact inverse of join_tags()
for any list of non-empty names.
"""

import re
from typing import Iterable, List

DELIMITER = ":"
ESCAPE = "\\"

_SPECIAL_RE = re.compile(r"([:\\])")


def escape_tag(tag: str) -> str:
    """Prefix every ':' and '\\' with a backslash."""
    return _SPECIAL_RE.sub(r"\\\1", tag)


def unescape_tag(tag: str) -> str:
    """
    Drop the escape character in front of each escaped ':' or '\\'.

    Raises ValueError for a dangling escape or an escape in front of any
    other character; escape_tag() never produces either.
    """
    out = []
    i = 0
    while i < len(tag):
        ch = tag[i]
        if ch == ESCAPE:
            if i + 1 >= len(tag):
                raise ValueError(f"dangling escape at end of tag {tag!r}")
            nxt = tag[i + 1]
            if nxt not in (DELIMITER, ESCAPE):
                raise ValueError(f"invalid escape sequence {ch + nxt!r} in tag {tag!r}")
            out.append(nxt)
            i += 2
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def join_tags(tags: Iterable[str]) -> str:
    return DELIMITER.join(escape_tag(t) for t in tags)


def _trailing_escapes(segment: str) -> int:
    return len(segment) - len(segment.rstrip(ESCAPE))


def split_tags(joined: str) -> List[str]:
    """
    Split a join_tags() string back into the tag names.

    A ':' only separates two names when it is preceded by an even number
    (including zero) of backslashes. Segments ending in an odd number of
    backslashes are glued back to the next one with the ':' restored.

    An empty string gives []. The one-element list [""] also joins to "", so
    it does not survive the round trip; device records never carry an empty
    tag name.
    """
    if joined == "":
        return []
    raw = joined.split(DELIMITER)
    segments: List[str] = []
    current = raw[0]
    for piece in raw[1:]:
        if _trailing_escapes(current) % 2 == 1:
            current = current + DELIMITER + piece
        else:
            segments.append(current)
            current = piece
    segments.append(current)
    return [unescape_tag(s) for s in segments]
