"""Split a command line into argument tokens."""

from __future__ import annotations

SEPARATOR = " "
SINGLE_QUOTE = "'"


def tokenize(line: str) -> list[str]:
    """Split ``line`` on spaces, grouping characters inside single quotes.

    Quote characters are stripped and never produce a token on their own, so
    ``''`` contributes nothing. Runs of spaces collapse. An unterminated quote
    is closed implicitly at the end of the line rather than rejected.

    Args:
        line: Raw command line without its trailing newline.

    Returns:
        Tokens in the order they appear.
    """

    tokens: list[str] = []
    buf: list[str] = []
    in_single = False

    for char in line:
        if char == SINGLE_QUOTE:
            in_single = not in_single
            continue
        if char == SEPARATOR and not in_single:
            if buf:
                tokens.append("".join(buf))
                buf.clear()
            continue
        buf.append(char)

    if buf:
        tokens.append("".join(buf))
    return tokens
