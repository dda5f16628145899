"""Data model for split shell command lines.

This module defines the values produced by the scanner and the splitter:
- Span: a bounds-checked view into the input buffer
- RedirectionKind and ControlOperator: the recognized operator sets
- CommandRecord: the result of splitting one command
- Cursor: the continuation context threaded through repeated calls
- SplitterError: errors raised when the cursor contract is broken
"""

from dataclasses import dataclass, field
from enum import Enum


class SplitterError(Exception):
    """Base exception for splitter errors."""

    pass


class CursorNotInitializedError(SplitterError):
    """Raised when resuming from a cursor that was never given a buffer.

    Resuming requires a prior call that passed the buffer in; the
    splitter refuses to guess rather than scanning nothing.
    """

    pass


class RedirectionKind(Enum):
    """I/O redirection attached to a single command."""

    NONE = "none"
    OUT_TRUNCATE = ">"
    OUT_APPEND = ">>"
    IN = "<"
    IN_OUT = "<>"


class ControlOperator(Enum):
    """Connective between a command and the one following it."""

    NONE = "none"
    AND = "&&"
    OR = "||"
    BACKGROUND = "&"
    PIPE = "|"
    SEQUENCE = ";"


@dataclass(frozen=True)
class Span:
    """
    Half-open view ``[begin, end)`` into a source string.

    The source is referenced, not copied; ``text`` slices on demand.
    """

    source: str = field(repr=False)
    begin: int
    end: int

    def __post_init__(self):
        if not 0 <= self.begin <= self.end <= len(self.source):
            raise ValueError(
                f"Span [{self.begin}, {self.end}) is outside a buffer of length {len(self.source)}"
            )

    @classmethod
    def empty(cls, source: str, at: int) -> "Span":
        """Create an empty span positioned at ``at``."""
        return cls(source, at, at)

    @property
    def text(self) -> str:
        return self.source[self.begin : self.end]

    @property
    def is_empty(self) -> bool:
        return self.begin == self.end

    def __len__(self) -> int:
        return self.end - self.begin

    def __str__(self) -> str:
        return self.text

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {"text": self.text, "begin": self.begin, "end": self.end}


@dataclass(frozen=True)
class CommandRecord:
    """
    One command split out of a command line.

    Attributes:
        command: The command name
        parameters: All parameter text up to the first operator, as one span
        redirection_kind: Redirection before the command or after its parameters, if any
        redirection_target: Target of the redirection (empty if none)
        operator: Control operator ending this command
        extent: The whole command as written, without the control operator
    """

    command: Span
    parameters: Span
    redirection_kind: RedirectionKind
    redirection_target: Span
    operator: ControlOperator
    extent: Span

    @property
    def has_redirection(self) -> bool:
        return self.redirection_kind is not RedirectionKind.NONE

    @property
    def is_empty(self) -> bool:
        """Check if the record carries no command (a bare separator or end of input)."""
        return self.command.is_empty

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "text": self.extent.text,
            "command": self.command.to_dict(),
            "parameters": self.parameters.to_dict(),
            "redirection": {
                "kind": self.redirection_kind.name.lower(),
                "symbol": self.redirection_kind.value if self.has_redirection else None,
                "target": self.redirection_target.to_dict(),
            },
            "operator": {
                "kind": self.operator.name.lower(),
                "symbol": self.operator.value if self.operator is not ControlOperator.NONE else None,
            },
        }


class Cursor:
    """
    Continuation context for resumable scanning.

    A cursor is unbound until a call receives a buffer; from then on it holds
    that buffer and the offset where the next call resumes. Each cursor must
    only be used by one caller at a time.
    """

    __slots__ = ("_buffer", "_offset")

    def __init__(self):
        self._buffer: str | None = None
        self._offset = 0

    @property
    def buffer(self) -> str | None:
        return self._buffer

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def is_bound(self) -> bool:
        return self._buffer is not None

    @property
    def at_end(self) -> bool:
        return self._buffer is None or self._offset >= len(self._buffer)

    def bind(self, buffer: str) -> None:
        """Attach the cursor to a new buffer and rewind it."""
        self._buffer = buffer
        self._offset = 0

    def resolve(self, input: str | None) -> str:
        """Return the buffer to scan: ``input`` (binding to it) or the saved one.

        Raises:
            CursorNotInitializedError: If ``input`` is None and the cursor is unbound
        """
        if input is not None:
            self.bind(input)
            return input
        if self._buffer is None:
            raise CursorNotInitializedError("Cannot resume: cursor has not been bound to a buffer")
        return self._buffer

    def advance_to(self, offset: int) -> None:
        if self._buffer is None or not 0 <= offset <= len(self._buffer):
            raise ValueError(f"Offset {offset} is outside the bound buffer")
        self._offset = offset

    def __repr__(self) -> str:
        if self._buffer is None:
            return "Cursor(unbound)"
        return f"Cursor(offset={self._offset}, length={len(self._buffer)})"
