"""Resolution and verification of content files."""

from bad_contents_lister.checker.checker import ContentChecker
from bad_contents_lister.checker.extensions import ExtensionResolver
from bad_contents_lister.checker.fallback import FallbackFinder, Located, locate
from bad_contents_lister.checker.paths import path_of, relative_path, ticket_of
from bad_contents_lister.checker.results import (
    OK,
    Code,
    Empty,
    EmptyNotFound,
    Error,
    NotFound,
    Ok,
    Result,
    Size,
    describe,
)

__all__ = [
    "OK",
    "Code",
    "ContentChecker",
    "Empty",
    "EmptyNotFound",
    "Error",
    "ExtensionResolver",
    "FallbackFinder",
    "Located",
    "NotFound",
    "Ok",
    "Result",
    "Size",
    "describe",
    "locate",
    "path_of",
    "relative_path",
    "ticket_of",
]
