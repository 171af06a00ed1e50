"""Small string helpers: tokenising, comment stripping, trimming, replacing."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

_BLANKS = " \r\n\t"


def split(s: str, delims: str = " ", max_splits: int = -1) -> list[str]:
    """Split ``s`` at any character of ``delims``, dropping empty tokens.

    Once ``max_splits`` tokens have been produced, the rest of the string
    (if not empty) becomes the last token. A negative value means no limit.
    """
    tokens: list[str] = []
    first = 0
    length = len(s)
    while True:
        done = False
        if len(tokens) == max_splits:
            done = True
            last = length
        else:
            candidates = [p for p in (s.find(d, first) for d in delims) if p != -1]
            if candidates:
                last = min(candidates)
            else:
                done = True
                last = length
        if last > first:
            tokens.append(s[first:last])
        first = last + 1
        if done:
            return tokens


def remove_from(s: str, c: str, escape: str = "") -> str:
    """Cut ``s`` at the first ``c`` that is not part of the ``escape`` sequence."""
    cpos = escape.find(c)
    esclen = len(escape)
    check_escape = esclen > 0 and cpos != -1
    slen = len(s)

    n = 0
    while True:
        n = s.find(c, n)
        if n == -1:
            return s
        if check_escape and n >= cpos and n + esclen - cpos <= slen:
            found = s[n - cpos:n - cpos + esclen] != escape
        else:
            found = True
        if found:
            return s[:n]
        n += 1


def trim(s: str) -> str:
    """Remove spaces, tabs, carriage returns and newlines from both ends."""
    return s.strip(_BLANKS)


def replace_all(
    s: str,
    replacements: Mapping[str, str] | Iterable[tuple[str, str]],
) -> str:
    """Apply each (search, replacement) pair in order, replacing every occurrence."""
    pairs = replacements.items() if isinstance(replacements, Mapping) else replacements
    for search, rep in pairs:
        n = 0
        while (n := s.find(search, n)) != -1:
            s = s[:n] + rep + s[n + len(search):]
            n += len(rep)
            if n == 0:
                n = 1
    return s


def replace(s: str, search: str, rep: str) -> str:
    """Replace every occurrence of ``search`` in ``s`` with ``rep``."""
    return replace_all(s, [(search, rep)])