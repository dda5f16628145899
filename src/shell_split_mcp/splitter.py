"""Resumable command splitting.

Each call to ``split_next_command`` consumes one command of a chained
command line such as ``cmd1 && cmd2 > out ; cmd3`` and leaves the cursor
positioned for the next call:

    cursor = Cursor()
    record = split_next_command("ls -l | sort > out", cursor)
    while record.operator is not ControlOperator.NONE:
        record = split_next_command(None, cursor)

The splitter never allocates copies of the input; every field of the
returned record is a span over the caller's buffer.
"""

from collections.abc import Iterator

from shell_split_mcp.records import (
    CommandRecord,
    ControlOperator,
    Cursor,
    CursorNotInitializedError,
    RedirectionKind,
    Span,
    SplitterError,
)
from shell_split_mcp.scanner import BLANKS, scan, skip_blanks

__all__ = [
    "CursorNotInitializedError",
    "SplitterError",
    "iter_commands",
    "split_command_line",
    "split_next_command",
]


def split_next_command(input: str | None, cursor: Cursor) -> CommandRecord:
    """Split the next command off a command line.

    Args:
        input: Command line to start splitting, or None to continue from ``cursor``
        cursor: Continuation context, saved past the consumed command

    Returns:
        CommandRecord for the command; all spans are empty when nothing but
        a separator (or nothing at all) was left

    Raises:
        CursorNotInitializedError: If ``input`` is None and no earlier call bound the cursor
    """
    buffer = cursor.resolve(input)
    length = len(buffer)
    start = skip_blanks(buffer, cursor.offset)

    begin, end, pos = scan(buffer, start)
    redirection_kind = RedirectionKind.NONE
    target = Span.empty(buffer, end)

    if begin == end:
        # A leading redirection ("< in sort") comes before the command name.
        redirection_kind, pos = _classify_redirection(buffer, pos)
        if redirection_kind is not RedirectionKind.NONE:
            target, pos = _scan_target(buffer, pos)
            begin, end, pos = scan(buffer, pos)

    command = Span(buffer, begin, end)
    parameters = Span.empty(buffer, end)

    if not command.is_empty:
        if pos < length and buffer[pos] in BLANKS:
            parameters, pos = _scan_parameters(buffer, pos)

        if redirection_kind is RedirectionKind.NONE:
            redirection_kind, pos = _classify_redirection(buffer, pos)
            if redirection_kind is not RedirectionKind.NONE:
                target, pos = _scan_target(buffer, pos)
            else:
                target = Span.empty(buffer, pos)

    stop = pos
    while stop > start and buffer[stop - 1] in BLANKS:
        stop -= 1

    operator, pos = _classify_operator(buffer, skip_blanks(buffer, pos))

    cursor.advance_to(pos)
    return CommandRecord(
        command=command,
        parameters=parameters,
        redirection_kind=redirection_kind,
        redirection_target=target,
        operator=operator,
        extent=Span(buffer, start, stop),
    )


def _scan_target(buffer: str, pos: int) -> tuple[Span, int]:
    begin, end, pos = scan(buffer, pos)
    return Span(buffer, begin, end), pos


def _scan_parameters(buffer: str, pos: int) -> tuple[Span, int]:
    """Collect blank-separated words up to the next operator into one span."""
    begin, end, pos = scan(buffer, pos)
    if begin == end:
        return Span.empty(buffer, begin), pos

    while pos < len(buffer) and buffer[pos] in BLANKS:
        word_begin, word_end, pos = scan(buffer, pos)
        if word_begin == word_end:
            break
        end = word_end

    return Span(buffer, begin, end), pos


def _classify_redirection(buffer: str, pos: int) -> tuple[RedirectionKind, int]:
    pos = skip_blanks(buffer, pos)
    head = buffer[pos : pos + 2]
    if head == ">>":
        return RedirectionKind.OUT_APPEND, pos + 2
    if head == "<>":
        return RedirectionKind.IN_OUT, pos + 2
    if head[:1] == ">":
        return RedirectionKind.OUT_TRUNCATE, pos + 1
    if head[:1] == "<":
        return RedirectionKind.IN, pos + 1
    return RedirectionKind.NONE, pos


def _classify_operator(buffer: str, pos: int) -> tuple[ControlOperator, int]:
    head = buffer[pos : pos + 2]
    if head == "&&":
        return ControlOperator.AND, pos + 2
    if head == "||":
        return ControlOperator.OR, pos + 2
    if head[:1] == "&":
        return ControlOperator.BACKGROUND, pos + 1
    if head[:1] == "|":
        return ControlOperator.PIPE, pos + 1
    if head[:1] == ";":
        return ControlOperator.SEQUENCE, pos + 1
    return ControlOperator.NONE, pos


def iter_commands(buffer: str, max_commands: int | None = None) -> Iterator[CommandRecord]:
    """Yield every command of ``buffer`` in order.

    Iteration stops after the first record whose operator is NONE, so a line
    ending on a separator yields a final empty record.

    Args:
        buffer: The command line to split
        max_commands: Optional cap on the number of records yielded

    Raises:
        ValueError: If ``max_commands`` is less than 1
    """
    if max_commands is not None and max_commands < 1:
        raise ValueError(f"max_commands must be at least 1, got {max_commands}")

    cursor = Cursor()
    record = split_next_command(buffer, cursor)
    count = 1
    yield record

    while record.operator is not ControlOperator.NONE:
        if max_commands is not None and count >= max_commands:
            return
        record = split_next_command(None, cursor)
        count += 1
        yield record


def split_command_line(buffer: str) -> list[CommandRecord]:
    """Split a whole command line into its records."""
    return list(iter_commands(buffer))
