"""Token boundary scanning.

The scanner advances over one maximal run of token characters. A double
quoted region is atomic: separators inside it never end the token, and an
unterminated quote runs to the end of the buffer.
"""

from collections.abc import Iterator

from shell_split_mcp.records import Cursor, Span

BLANKS = frozenset(" \t")
REDIRECTION_CHARS = frozenset("<>")
CONTROL_CHARS = frozenset("|&;")
SEPARATORS = BLANKS | REDIRECTION_CHARS | CONTROL_CHARS
QUOTE = '"'

# Two-character operators, matched before their one-character prefixes
DOUBLE_OPERATORS = (">>", "<>", "&&", "||")


def skip_blanks(buffer: str, pos: int) -> int:
    """Return the first position at or after ``pos`` that is not a blank."""
    while pos < len(buffer) and buffer[pos] in BLANKS:
        pos += 1
    return pos


def scan(buffer: str, pos: int) -> tuple[int, int, int]:
    """Scan one token starting at ``pos``.

    Args:
        buffer: The command line being scanned
        pos: Offset to start from; leading blanks are skipped

    Returns:
        Tuple of (begin, end, cursor) where ``[begin, end)`` is the token and
        cursor is the position just after it
    """
    begin = end = skip_blanks(buffer, pos)
    length = len(buffer)

    while end < length:
        char = buffer[end]
        if char == QUOTE:
            closing = buffer.find(QUOTE, end + 1)
            end = length if closing == -1 else closing + 1
        elif char in SEPARATORS:
            break
        else:
            end += 1

    return begin, end, end


def next_token(input: str | None, cursor: Cursor) -> Span:
    """Scan the next token from a fresh buffer or from the saved cursor.

    Args:
        input: Buffer to start scanning, or None to resume from ``cursor``
        cursor: Continuation context, updated past the returned token

    Returns:
        Span of the token (empty when the cursor sits on an operator or at the end)

    Raises:
        CursorNotInitializedError: If ``input`` is None and the cursor was never bound
    """
    buffer = cursor.resolve(input)
    begin, end, pos = scan(buffer, cursor.offset)
    cursor.advance_to(pos)
    return Span(buffer, begin, end)


def iter_tokens(buffer: str) -> Iterator[Span]:
    """Yield the words and operators of ``buffer`` from left to right."""
    pos = 0
    length = len(buffer)
    while True:
        begin, end, pos = scan(buffer, pos)
        if begin < end:
            yield Span(buffer, begin, end)
            continue
        if pos >= length:
            return
        width = 2 if buffer[pos : pos + 2] in DOUBLE_OPERATORS else 1
        yield Span(buffer, pos, pos + width)
        pos += width
