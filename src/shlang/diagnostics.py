"""Structured diagnostics for Shlang errors.

Every CompileError maps to a Report: a message, a labeled primary span, and
zero or more labeled secondary spans with optional help and note text. The
Report is pure data; format_report gives a plain-text rendering against a
FileStore for callers that want one. Colour and terminal layout belong to
whoever displays the text.

Example:
    >>> from shlang import parse
    >>> from shlang.errors import ParseError
    >>> try:
    ...     parse("<a></b>")
    ... except ParseError as err:
    ...     report = err.report()
    >>> report.help
    "Rename '</b>' to '</a>'."

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from shlang.errors import (
    CompileError,
    LexError,
    LexErrorKind,
    ParseError,
    ParseErrorKind,
)
from shlang.location import Span

if TYPE_CHECKING:
    from shlang.filestore import FileStore

VALID_ESCAPES_NOTE = r"The only valid escape sequences are: \", \\, \', \n, \t, \0 ."


@dataclass(frozen=True, slots=True)
class Label:
    """A span with a message attached."""

    span: Span
    message: str


@dataclass(frozen=True, slots=True)
class Report:
    """Rendering-independent diagnostic.

    Attributes:
        code: Error kind identifier (e.g. "unmatched-tag")
        message: Primary message
        span: Primary span
        label: Message attached to the primary span
        secondary: Additional labeled spans
        help: Suggested fix, if any
        note: Extra information, if any

    """

    code: str
    message: str
    span: Span
    label: str
    secondary: tuple[Label, ...] = ()
    help: str | None = None
    note: str | None = None

    @property
    def labels(self) -> tuple[Label, ...]:
        """Primary label followed by the secondary ones."""
        return (Label(self.span, self.label), *self.secondary)


def build_report(error: CompileError) -> Report:
    """Map any lex or parse error to its Report.

    Args:
        error: The error to describe

    Returns:
        Report whose primary span is the error's span
    """
    if isinstance(error, LexError):
        return _lex_report(error)
    if isinstance(error, ParseError):
        return _parse_report(error)
    raise TypeError(f"No report mapping for {type(error).__name__}")


def _lex_report(error: LexError) -> Report:
    code = error.kind.value
    message = error.summary
    span = error.span
    match error.kind:
        case LexErrorKind.INVALID_IDENT:
            return Report(
                code,
                message,
                span,
                "This contains special characters.",
                note="Identifiers can only be made up of letters, digits and underscores.",
            )
        case LexErrorKind.INVALID_NUMBER:
            return Report(code, message, span, "This is not a valid number.")
        case LexErrorKind.UNEXPECTED_STREAM_END:
            return Report(code, message, span, "Expected more characters here.")
        case LexErrorKind.UNEXPECTED_CHAR:
            return Report(code, message, span, "This should not be here.")
        case LexErrorKind.UNTERMINATED_STR:
            return Report(code, message, span, f"Missing {error.char!r}.")
        case LexErrorKind.UNTERMINATED_COMMENT:
            return Report(
                code,
                message,
                span,
                "This comment is never closed.",
                help="Close every '<*' with a matching '*>'.",
            )
        case LexErrorKind.INVALID_ESCAPE:
            return Report(
                code,
                message,
                span,
                "This is not a valid escape sequence.",
                note=VALID_ESCAPES_NOTE,
            )


def _parse_report(error: ParseError) -> Report:
    code = error.kind.value
    message = error.summary
    span = error.span
    match error.kind:
        case ParseErrorKind.INVALID_TOKEN:
            expected = error.expected.name if error.expected else "?"
            return Report(code, message, span, f"Expected this token to be {expected}.")
        case ParseErrorKind.UNEXPECTED_TOKEN:
            return Report(code, message, span, "This should not be here.")
        case ParseErrorKind.UNEXPECTED_STREAM_END:
            return Report(code, message, span, "Expected more tokens here.")
        case ParseErrorKind.UNSPECIFIED:
            return Report(code, message, span, "On this expression.")
        case ParseErrorKind.UNMATCHED_TAG:
            start_tag = error.start_tag
            end_tag = error.end_tag
            secondary: list[Label] = []
            help_text = None
            if start_tag is not None:
                secondary.append(Label(start_tag.span, f"Opening tag <{start_tag.item}> is here."))
            if end_tag is not None:
                secondary.append(Label(end_tag.span, f"</{end_tag.item}> does not close it."))
            if start_tag is not None and end_tag is not None:
                help_text = f"Rename '</{end_tag.item}>' to '</{start_tag.item}>'."
            return Report(
                code,
                message,
                span,
                "In this element.",
                secondary=tuple(secondary),
                help=help_text,
            )


# =============================================================================
# Plain-text formatting
# =============================================================================


def format_report(report: Report, store: FileStore) -> str:
    """Render a report as plain text against the sources in store.

    Each label shows ``name:line:col``, the source line and a caret
    underline. A span at the very end of its file points at the last line.

    Raises:
        FileStoreError: If a label's file id is not in the store
    """
    lines = [f"error[{report.code}]: {report.message}"]
    for label in report.labels:
        lines.extend(_format_label(label, store))
    if report.help:
        lines.append(f"  = help: {report.help}")
    if report.note:
        lines.append(f"  = note: {report.note}")
    return "\n".join(lines)


def _format_label(label: Label, store: FileStore) -> list[str]:
    data = store.get(label.span.file_id).encode("utf-8")
    span = label.span
    if span.start >= len(data) and data:
        line = Span.last_line(data, span.file_id)
    else:
        line = span.line_bounds(data)

    # Multi-line spans are shown on their first line only
    line_end = data.find(b"\n", line.start, line.end)
    if line_end == -1:
        line_end = line.end

    lineno = data.count(b"\n", 0, line.start) + 1
    prefix = data[line.start : span.start].decode("utf-8", errors="replace")
    col = len(prefix) + 1
    text = data[line.start : line_end].decode("utf-8", errors="replace")
    marked_start = min(span.start, line_end)
    marked = data[marked_start : min(span.end, line_end)].decode("utf-8", errors="replace")
    gutter = " " * len(str(lineno))
    return [
        f"  --> {store.name(span.file_id)}:{lineno}:{col}",
        f" {lineno} | {text}",
        f" {gutter} | {' ' * len(prefix)}{'^' * max(len(marked), 1)} {label.message}",
    ]


__all__ = [
    "Label",
    "Report",
    "build_report",
    "format_report",
]
