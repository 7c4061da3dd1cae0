"""Small text helpers: integer lists, field splitting, logical lines."""

from __future__ import annotations

import itertools
import re
from typing import IO, Iterable, List, Optional, Sequence, Tuple

# Characters treated as white space, matching the C locale.
WHITESPACE = " \t\n\v\f\r"

_INT_RE = re.compile(r"[ \t\n\v\f\r]*[+-]?[0-9]+")


class SplitOverflowError(ValueError):
    """A field is longer than the allowed maximum length."""

    def __init__(self, fields: List[str], rest: str) -> None:
        super().__init__(f"field too long before {rest!r}")
        self.fields = fields
        self.rest = rest


def get_ints(
    text: str,
    maxnum: int,
    delim: str,
    defaults: Optional[Iterable[Optional[int]]] = None,
) -> Tuple[int, List[Optional[int]]]:
    """Parse up to *maxnum* integers separated by *delim*.

    Empty fields keep the corresponding entry of *defaults*. Returns the
    number of delimiters plus one and the list of values. Raises
    ValueError if a field is not an integer.
    """
    values: List[Optional[int]] = list(defaults) if defaults is not None else []
    if len(values) < maxnum:
        values.extend([None] * (maxnum - len(values)))

    count = 0
    pos = 0
    length = len(text)
    while pos < length and count < maxnum:
        if text[pos] == delim:
            count += 1
            pos += 1
            continue
        match = _INT_RE.match(text, pos)
        end = match.end() if match else pos
        if end < length and text[end] != delim:
            raise ValueError(f"{text!r}: invalid integer list")
        if match is None:
            break
        values[count] = int(match.group().strip(WHITESPACE))
        pos = end
    return count + 1, values


def split(text: str, maxlen: int, maxnum: int) -> Tuple[List[str], str]:
    """Split *text* into at most *maxnum* white-space separated fields.

    Each field may hold at most ``maxlen - 1`` characters. Returns the
    fields and the unconsumed remainder of *text*. Raises
    SplitOverflowError if a field is too long.
    """
    fields: List[str] = []
    pos = 0
    length = len(text)
    while len(fields) < maxnum:
        while pos < length and text[pos] in WHITESPACE:
            pos += 1
        if pos >= length:
            break
        limit = min(length, pos + maxlen - 1)
        start = pos
        while pos < limit and text[pos] not in WHITESPACE:
            pos += 1
        fields.append(text[start:pos])
        if pos < length and text[pos] not in WHITESPACE:
            raise SplitOverflowError(fields, text[pos:])
    return fields, text[pos:]


def split2(text: str, delims: str, keylen: Optional[int] = None) -> Tuple[str, str]:
    """Split *text* into a key and the rest, separated by any of *delims*.

    With *keylen* given, the key is cut to ``keylen - 1`` characters.
    """
    end = next((i for i, ch in enumerate(text) if ch in delims), len(text))
    key = text[:end]
    if keylen is not None:
        key = key[: max(keylen - 1, 0)]
    rest = text[end:].lstrip(delims) if delims else text[end:]
    return key, rest


def _toupper(ch: str) -> str:
    return ch.upper() if "a" <= ch <= "z" else ch


def startswith(s1: str, s2: str) -> bool:
    """Return True if *s1* starts with *s2*."""
    return s1.startswith(s2)


def startswith_nocase(s1: str, s2: str) -> bool:
    """Case-insensitive variant of startswith()."""
    if len(s1) < len(s2):
        return False
    return all(_toupper(a) == _toupper(b) for a, b in zip(s1, s2))


def strcasecmp(s1: str, s2: str) -> int:
    """Compare two strings ignoring ASCII case, like the C function."""
    for c1, c2 in itertools.zip_longest(s1, s2, fillvalue=""):
        u1 = ord(_toupper(c1)) if c1 else 0
        u2 = ord(_toupper(c2)) if c2 else 0
        if u1 != u2 or u1 == 0:
            return u1 - u2
    return 0


def trimmed_tail(text: str) -> int:
    """Return the index just past the last non-white-space character."""
    return len(text.rstrip(WHITESPACE))


def read_logicline(stream: IO[str], size: int = 4096) -> Optional[str]:
    """Read one logical line, joining lines continued by a trailing backslash.

    Leading and trailing white space of each physical line is removed,
    and the result holds at most ``size - 1`` characters. A blank line
    yields an empty string; None is returned at end of stream.
    """
    parts: List[str] = []
    remaining = size - 1
    while remaining > 1:
        raw = stream.readline(remaining - 1)
        if not raw:
            if not parts:
                return None
            break
        body = raw.lstrip(WHITESPACE)
        if not body:
            break
        body = body[: trimmed_tail(body)]
        continued = body.endswith("\\")
        if continued:
            body = body[:-1]
        parts.append(body)
        remaining -= len(body)
        if not continued:
            break
    return "".join(parts)


def fskim(
    stream: IO[str], endchar: str, bufsize: Optional[int] = None
) -> Tuple[int, str]:
    """Read characters up to and including *endchar*.

    Returns the number of characters read and the text kept; at most
    ``bufsize - 1`` characters are kept when *bufsize* is given, the
    rest being discarded.
    """
    kept: List[str] = []
    room = None if bufsize is None else bufsize - 1
    nread = 0
    while True:
        ch = stream.read(1)
        if not ch:
            break
        nread += 1
        if room is None or room > 0:
            kept.append(ch)
            if room is not None:
                room -= 1
        if ch == endchar:
            break
    return nread, "".join(kept)


def _as_sequence(values: Sequence[str]) -> List[str]:
    return list(values)