"""Greedy packing of measured tokens into width-bounded lines.

The same primitive wraps words into text lines and chip labels into
chip rows; only the token measurement and the gap between tokens differ.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

__all__ = ["pack_tokens", "wrap_text"]


def pack_tokens(
    tokens: Iterable[str],
    measure: Callable[[str], float],
    max_width: float,
    gap: float = 0.0,
) -> list[list[str]]:
    """Pack *tokens* into lines whose measured width stays within *max_width*.

    Tokens are accumulated onto the current line while
    ``line_width + gap + token_width <= max_width``; the token that would
    overflow starts the next line. A token wider than *max_width* on its own
    is placed alone on a line and never split.

    Args:
        tokens: Tokens in display order.
        measure: Returns the rendered width of one token.
        max_width: Horizontal budget for one line.
        gap: Space inserted between two adjacent tokens.

    Returns:
        Lines as lists of tokens, in order. Empty input yields no lines.
    """
    lines: list[list[str]] = []
    current: list[str] = []
    width = 0.0

    for token in tokens:
        token_width = measure(token)
        if not current:
            current = [token]
            width = token_width
            continue

        candidate = width + gap + token_width
        if candidate <= max_width:
            current.append(token)
            width = candidate
        else:
            lines.append(current)
            current = [token]
            width = token_width

    if current:
        lines.append(current)
    return lines


def wrap_text(
    text: str,
    measure: Callable[[str], float],
    max_width: float,
    space_width: float,
) -> list[str]:
    """Word-wrap *text* into lines no wider than *max_width*.

    Explicit newlines always start a new line; blank lines are dropped.
    Runs of whitespace inside a line collapse to a single space.
    """
    lines: list[str] = []
    for paragraph in text.splitlines():
        words = paragraph.split()
        if not words:
            continue
        for packed in pack_tokens(words, measure, max_width, space_width):
            lines.append(" ".join(packed))
    return lines
