"""Comment stripping and blank-line normalisation for C-family sources.

The cleaner is a single forward pass over the text driven by a small state
machine. String literals (single or double quoted) are copied through
untouched, including backslash escapes, so comment markers inside them are
never treated as comments. Line comments keep their terminating newline so
that line structure survives until blank lines are collapsed.
"""

from __future__ import annotations

from enum import Enum


class ParserContext(Enum):
    """Lexer state at the current character position."""

    NORMAL = "normal"
    IN_DOUBLE_QUOTE_STRING = "double_quote_string"
    IN_SINGLE_QUOTE_STRING = "single_quote_string"
    IN_LINE_COMMENT = "line_comment"
    IN_BLOCK_COMMENT = "block_comment"


_QUOTE_FOR_CONTEXT = {
    ParserContext.IN_DOUBLE_QUOTE_STRING: '"',
    ParserContext.IN_SINGLE_QUOTE_STRING: "'",
}


def remove_comments(code: str) -> str:
    """Return ``code`` with ``//`` and ``/* */`` comments removed.

    An unterminated block comment swallows the rest of the input.
    """
    out: list[str] = []
    state = ParserContext.NORMAL
    i = 0
    n = len(code)

    while i < n:
        ch = code[i]
        nxt = code[i + 1] if i + 1 < n else ""

        if state is ParserContext.NORMAL:
            if ch == '"':
                state = ParserContext.IN_DOUBLE_QUOTE_STRING
                out.append(ch)
                i += 1
            elif ch == "'":
                state = ParserContext.IN_SINGLE_QUOTE_STRING
                out.append(ch)
                i += 1
            elif ch == "/" and nxt == "/":
                state = ParserContext.IN_LINE_COMMENT
                i += 2
            elif ch == "/" and nxt == "*":
                state = ParserContext.IN_BLOCK_COMMENT
                i += 2
            else:
                out.append(ch)
                i += 1

        elif state in _QUOTE_FOR_CONTEXT:
            out.append(ch)
            if ch == "\\" and i + 1 < n:
                out.append(nxt)
                i += 2
                continue
            if ch == _QUOTE_FOR_CONTEXT[state]:
                state = ParserContext.NORMAL
            i += 1

        elif state is ParserContext.IN_LINE_COMMENT:
            if ch == "\n":
                out.append(ch)
                state = ParserContext.NORMAL
            i += 1

        else:
            if ch == "*" and nxt == "/":
                state = ParserContext.NORMAL
                i += 2
            else:
                i += 1

    return "".join(out)


def remove_blank_lines(code: str) -> str:
    """Drop empty and whitespace-only lines and strip trailing whitespace."""
    lines = (line.rstrip() for line in code.split("\n"))
    return "\n".join(line for line in lines if line)


def clean(code: str) -> str:
    """Remove comments, then collapse blank lines."""
    return remove_blank_lines(remove_comments(code))


__all__ = ["ParserContext", "clean", "remove_blank_lines", "remove_comments"]
