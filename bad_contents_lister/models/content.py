"""Content records and their parent object metadata."""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

MIN_TICKET = -(2**31)
MAX_TICKET = 2**32 - 1
# tickets above this are stored as their signed 32-bit form
MAX_SIGNED_TICKET = 2**31 - 1


@dataclass(frozen=True, eq=False)
class Content:
    """A content object: one file of a format's page in a store.

    Contents are ordered by, in that order:

    - rendition: primary contents come first
    - format: groups renditions by format
    - page: in ascending order
    - store, then ticket: complete the ordering between contents
    - size, modified, extension: only there to agree with equality

    Equality ignores the page, as two records of a same ticket in a same
    store designate the same file. A ticket given in its unsigned form is
    stored in its signed form, as the database holds it.
    """

    store: str
    ticket: int
    parent: str
    rendition: bool
    format: str
    page: int
    extension: str | None
    size: int
    modified: datetime

    def __post_init__(self) -> None:
        """Validate the content and normalize its ticket and timestamp.

        Raises:
            ValueError: If a field is out of its range
        """
        if not self.store:
            raise ValueError("store must not be empty")
        if not MIN_TICKET <= self.ticket <= MAX_TICKET:
            raise ValueError(f"ticket must fit on 32 bits, got {self.ticket}")
        if self.ticket > MAX_SIGNED_TICKET:
            object.__setattr__(self, "ticket", self.ticket - 2**32)
        if self.page < 0:
            raise ValueError(f"page must be non-negative, got {self.page}")
        if self.size < 0:
            raise ValueError(f"size must be non-negative, got {self.size}")
        if self.modified.tzinfo is None:
            modified = self.modified.replace(tzinfo=UTC)
        else:
            modified = self.modified.astimezone(UTC)
        object.__setattr__(self, "modified", modified)

    @property
    def key(self) -> str:
        """Identify the content as ``{store}/{ticket}``."""
        return f"{self.store}/{self.ticket}"

    def relative_path(self) -> str:
        """Get the path of the content's file relative to its store."""
        from bad_contents_lister.checker.paths import relative_path

        return relative_path(self.ticket, self.extension)

    def _sort_key(self) -> tuple[Any, ...]:
        # an absent extension sorts after a present one
        return (
            self.rendition,
            self.format,
            self.page,
            self.store,
            self.ticket,
            self.size,
            self.modified,
            (self.extension is None, self.extension or ""),
        )

    def _identity(self) -> tuple[Any, ...]:
        return (
            self.store,
            self.ticket,
            self.parent,
            self.rendition,
            self.format,
            self.extension,
            self.size,
            self.modified,
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Content):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Content):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Content):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Content):
            return NotImplemented
        return self._sort_key() >= other._sort_key()

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Content):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())


@dataclass(frozen=True, eq=False)
class Parent:
    """Metadata of the object owning a content."""

    id: str
    name: str
    type: str
    current: bool

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("parent id must not be empty")
        if self.name is None:
            object.__setattr__(self, "name", "")

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Parent):
            return NotImplemented
        return (
            self.current == other.current
            and self.id == other.id
            and self.name == other.name
            and self.type == other.type
        )

    def __hash__(self) -> int:
        # all records of one object share name, type and current flag
        return hash(self.id)


@dataclass(frozen=True)
class DecoratedContent:
    """A content joined with its parent's metadata."""

    content: Content
    parent: Parent
