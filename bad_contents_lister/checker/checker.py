"""Verification of a content against the file stored on disk."""

from pathlib import Path

from bad_contents_lister.checker.fallback import FallbackFinder
from bad_contents_lister.checker.paths import path_of
from bad_contents_lister.checker.results import (
    OK,
    Empty,
    EmptyNotFound,
    Error,
    NotFound,
    Result,
    Size,
)
from bad_contents_lister.models import Content, DecoratedContent, Stores


class ContentChecker:
    """Check that the file of a content exists with the expected size.

    The checker holds no mutable state: distinct contents may be checked
    concurrently as long as files do not change meanwhile.
    """

    def __init__(self, stores: Stores, finder: FallbackFinder | None = None):
        """Initialize the checker.

        Args:
            stores: Stores the contents live in
            finder: Locates files, defaults to a FallbackFinder
        """
        self.stores = stores
        self.finder = finder or FallbackFinder()

    def path_of(self, content: Content) -> Path:
        """Get the canonical path of a content's file.

        Raises:
            MissingStoreError: If the content's store is unknown
        """
        store = self.stores.by_id(content.store)
        *directories, name = path_of(content.ticket)
        return store.path.joinpath(*directories, name + (content.extension or ""))

    def check(self, dc: DecoratedContent) -> Result:
        """Verify a content.

        Args:
            dc: Content to verify, with its parent

        Returns:
            The verification outcome

        Raises:
            MissingStoreError: If the content's store is unknown
        """
        content = dc.content
        located = self.finder.locate(self.path_of(content))
        path = located.path
        if not located.found:
            if content.size == 0:
                return EmptyNotFound(path)
            return NotFound(path)

        try:
            actual = path.stat().st_size
        except OSError as e:
            return Error(path, e)

        if actual == content.size:
            return OK
        if actual == 0:
            return Empty(path, expected=content.size)
        return Size(path, expected=content.size, actual=actual)

    __call__ = check
