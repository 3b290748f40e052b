"""Delimited report listing the contents that failed verification."""

import csv
from datetime import UTC, datetime
from pathlib import Path
from types import TracebackType
from typing import TextIO

from bad_contents_lister.checker.results import Ok, Result, describe
from bad_contents_lister.models import DecoratedContent

DEFAULT_SEPARATOR = "|"


def report_name(user: str, now: datetime | None = None) -> str:
    """Get the file name of a report: ``{user}-{YYYYMMDDTHHMMSSZ}.log``."""
    now = (now or datetime.now(UTC)).astimezone(UTC)
    return f"{user}-{now:%Y%m%dT%H%M%SZ}.log"


def format_timestamp(value: datetime) -> str:
    """Render a timestamp as ISO-8601 UTC with milliseconds."""
    return value.astimezone(UTC).isoformat(timespec="milliseconds").replace(
        "+00:00", "Z"
    )


def _flag(value: bool) -> str:
    return "true" if value else "false"


class ReportWriter:
    """Write one delimited line per failed verification.

    Fields are, in order: parent id, name, type and current flag, content
    format, rendition flag, page, modified timestamp, extension, expected
    size and ticket, result code, resolved path and error description.
    """

    def __init__(self, stream: TextIO, separator: str = DEFAULT_SEPARATOR):
        """Initialize the writer.

        Args:
            stream: Text stream to write to, closed with the writer
            separator: Single character separating fields
        """
        if len(separator) != 1:
            raise ValueError(f"separator must be a single character, got {separator!r}")
        self.stream = stream
        self.separator = separator
        self.written = 0
        self.path: Path | None = None
        self._writer = csv.writer(stream, delimiter=separator, lineterminator="\n")

    @classmethod
    def open(
        cls,
        directory: Path,
        user: str,
        separator: str = DEFAULT_SEPARATOR,
        now: datetime | None = None,
    ) -> "ReportWriter":
        """Create a writer on a new report file named after the user.

        Args:
            directory: Directory the report is created in
            user: Database user the report is named after
            separator: Single character separating fields
            now: Time the report is named after, defaults to now

        Returns:
            The writer; its ``path`` is the report's absolute path
        """
        path = (directory / report_name(user, now)).resolve()
        stream = open(path, "w", encoding="utf-8", newline="")
        writer = cls(stream, separator)
        writer.path = path
        return writer

    def write_error(self, dc: DecoratedContent, result: Result) -> None:
        """Write the line of a failed verification, nothing for a success.

        Args:
            dc: Verified content
            result: Verification outcome
        """
        if isinstance(result, Ok):
            return
        content, parent = dc.content, dc.parent
        self._writer.writerow(
            [
                parent.id,
                parent.name,
                parent.type,
                _flag(parent.current),
                content.format,
                _flag(content.rendition),
                content.page,
                format_timestamp(content.modified),
                content.extension or "",
                content.size,
                content.ticket,
                result.code.value,
                str(result.path),
                describe(result),
            ]
        )
        self.stream.flush()
        self.written += 1

    def close(self) -> None:
        self.stream.close()

    def __enter__(self) -> "ReportWriter":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
