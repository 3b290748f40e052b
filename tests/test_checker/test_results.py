"""Tests for verification outcomes."""

import errno
from pathlib import Path

import pytest

from bad_contents_lister.checker import (
    OK,
    Code,
    Empty,
    EmptyNotFound,
    Error,
    NotFound,
    Ok,
    Size,
    describe,
)
from bad_contents_lister.checker.results import error_message

PATH = Path("/data/fs1/00000001/00/01/7a/2b")


class TestResults:
    """Test cases for the result cases and their codes."""

    def test_should_list_codes_in_reporting_order(self):
        """Codes should iterate in reporting order."""
        assert [str(code) for code in Code] == [
            "OK",
            "NOTFOUND",
            "EMPTYNOTFOUND",
            "BADSIZE",
            "EMPTY",
            "ERROR",
        ]

    @pytest.mark.parametrize(
        "result, code",
        [
            (OK, Code.OK),
            (NotFound(PATH), Code.NOTFOUND),
            (EmptyNotFound(PATH), Code.EMPTYNOTFOUND),
            (Size(PATH, expected=10, actual=7), Code.BADSIZE),
            (Empty(PATH, expected=10), Code.EMPTY),
            (Error(PATH, OSError(errno.EIO, "I/O error")), Code.ERROR),
        ],
    )
    def test_should_carry_class_level_code(self, result, code):
        """Each case should carry its code."""
        assert result.code is code
        assert type(result).code is code

    def test_should_share_ok_singleton(self):
        """The OK constant should be the successful outcome."""
        assert isinstance(OK, Ok)
        assert OK == Ok()


class TestDescribe:
    """Test cases for describe."""

    @pytest.mark.parametrize(
        "result, description",
        [
            (NotFound(PATH), "content not found"),
            (EmptyNotFound(PATH), "content not found but was empty !"),
            (Size(PATH, expected=10, actual=7), "bad size (7) when expecting 10 bytes"),
            (Empty(PATH, expected=10), "empty size when expecting 10 bytes"),
        ],
    )
    def test_should_describe_failures(self, result, description):
        """Failures should be described for the report."""
        assert describe(result) == description

    def test_should_describe_access_errors(self):
        """Access errors should include the OS error message."""
        error = PermissionError(errno.EACCES, "Permission denied", str(PATH))

        assert describe(Error(PATH, error)) == (
            f"error accessing the content: Permission denied: {PATH}"
        )

    def test_should_refuse_to_describe_success(self):
        """A successful verification has no description."""
        with pytest.raises(ValueError):
            describe(OK)


class TestErrorMessage:
    """Test cases for error_message."""

    def test_should_fall_back_on_str(self):
        """Errors without strerror should use their string form."""
        assert error_message(OSError("disk on fire")) == "disk on fire"

    def test_should_omit_missing_filename(self):
        """Errors without filename should only give strerror."""
        assert error_message(OSError(errno.EIO, "I/O error")) == "I/O error"
