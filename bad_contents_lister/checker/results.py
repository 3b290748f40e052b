"""Outcomes of a content verification.

The outcome is one of a closed set of cases. Consumers are expected to
match exhaustively on them, as :func:`describe` does.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import ClassVar, TypeAlias, assert_never


class Code(str, Enum):
    """Verification code, in reporting order."""

    OK = "OK"
    NOTFOUND = "NOTFOUND"
    EMPTYNOTFOUND = "EMPTYNOTFOUND"
    BADSIZE = "BADSIZE"
    EMPTY = "EMPTY"
    ERROR = "ERROR"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Ok:
    """The file exists with the expected size."""

    code: ClassVar[Code] = Code.OK


@dataclass(frozen=True)
class NotFound:
    """No file was found for the content."""

    path: Path
    code: ClassVar[Code] = Code.NOTFOUND


@dataclass(frozen=True)
class EmptyNotFound:
    """No file was found, but the content was expected to be empty."""

    path: Path
    code: ClassVar[Code] = Code.EMPTYNOTFOUND


@dataclass(frozen=True)
class Size:
    """The file exists but its (non zero) size differs from the expected one."""

    path: Path
    expected: int
    actual: int
    code: ClassVar[Code] = Code.BADSIZE


@dataclass(frozen=True)
class Empty:
    """The file exists but is empty while content was expected."""

    path: Path
    expected: int
    code: ClassVar[Code] = Code.EMPTY


@dataclass(frozen=True)
class Error:
    """The file size could not be read."""

    path: Path
    error: OSError
    code: ClassVar[Code] = Code.ERROR


OK = Ok()

Result: TypeAlias = Ok | NotFound | EmptyNotFound | Size | Empty | Error


def error_message(error: OSError) -> str:
    """Get the message of an I/O error, without its errno prefix."""
    if error.strerror:
        if error.filename is not None:
            return f"{error.strerror}: {error.filename}"
        return error.strerror
    return str(error)


def describe(result: Result) -> str:
    """Get the human readable description of a failed verification.

    Args:
        result: Verification outcome

    Returns:
        The description written to the report

    Raises:
        ValueError: If the verification succeeded
    """
    match result:
        case Ok():
            raise ValueError("a successful verification has no error description")
        case NotFound():
            return "content not found"
        case EmptyNotFound():
            return "content not found but was empty !"
        case Error(error=error):
            return f"error accessing the content: {error_message(error)}"
        case Size(expected=expected, actual=actual):
            return f"bad size ({actual}) when expecting {expected} bytes"
        case Empty(expected=expected):
            return f"empty size when expecting {expected} bytes"
        case _:
            assert_never(result)
