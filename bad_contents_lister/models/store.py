"""File stores and the registry of stores."""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from bad_contents_lister.core.errors import DuplicateStoreError, MissingStoreError


@dataclass(frozen=True)
class Store:
    """A file store of the repository.

    Both the id and the name identify a store. The name comes from the root
    attribute of the file store while the id is the file store's object
    identifier.

    Attributes:
        id: Raw storage identifier
        name: Unique human readable name
        path: Local directory holding the store's files for the docbase
        extension: Whether files are stored with their format's extension
    """

    id: str
    name: str
    path: Path
    extension: bool

    @classmethod
    def create(
        cls, id: str, name: str, base_path: str | Path, extension: bool
    ) -> "Store":
        """Create a store rooted below its location's directory.

        The docbase identifier (characters 2 to 7 of the store id), left
        padded with zeros to 8 characters, is appended to ``base_path``.

        Args:
            id: Storage identifier, at least 8 characters long
            name: Store name
            base_path: File system path of the store's location
            extension: Whether files carry their format's extension

        Returns:
            The matching store

        Raises:
            ValueError: If the identifier is too short to carry a docbase id
        """
        if len(id) < 8:
            raise ValueError(f"store id too short to carry a docbase id: {id!r}")
        docbase = id[2:8].zfill(8)
        return cls(id=id, name=name, path=Path(base_path) / docbase, extension=extension)


class Stores:
    """An immutable collection of stores, indexed by id and by name."""

    def __init__(self, stores: Iterable[Store]):
        """Index the stores.

        Args:
            stores: Individual stores

        Raises:
            DuplicateStoreError: If two stores share an id or a name
        """
        by_ids: dict[str, Store] = {}
        by_names: dict[str, Store] = {}
        for store in stores:
            if store.id in by_ids:
                raise DuplicateStoreError(f"duplicate store id found for store {store}")
            if store.name in by_names:
                raise DuplicateStoreError(
                    f"duplicate store name found for store {store}"
                )
            by_ids[store.id] = store
            by_names[store.name] = store
        self._by_ids: Mapping[str, Store] = MappingProxyType(by_ids)
        self._by_names: Mapping[str, Store] = MappingProxyType(by_names)

    @property
    def by_ids(self) -> Mapping[str, Store]:
        """Read-only view of the stores keyed by id."""
        return self._by_ids

    @property
    def by_names(self) -> Mapping[str, Store]:
        """Read-only view of the stores keyed by name."""
        return self._by_names

    def by_id(self, id: str) -> Store:
        """Get the store matching an identifier.

        Raises:
            MissingStoreError: If there is no such store
        """
        try:
            return self._by_ids[id]
        except KeyError:
            raise MissingStoreError(f"there is no store matching id {id}") from None

    def by_name(self, name: str) -> Store:
        """Get the store matching a name.

        Raises:
            MissingStoreError: If there is no such store
        """
        try:
            return self._by_names[name]
        except KeyError:
            raise MissingStoreError(f"there is no store matching name {name}") from None

    def name_of(self, id: str) -> str:
        return self.by_id(id).name

    def id_of(self, name: str) -> str:
        return self.by_name(name).id

    def with_extensions(self) -> frozenset[str]:
        """Get the ids of the stores whose files carry extensions."""
        return frozenset(store.id for store in self if store.extension)

    def __iter__(self) -> Iterator[Store]:
        return iter(self._by_ids.values())

    def __len__(self) -> int:
        return len(self._by_ids)

    def __contains__(self, id: object) -> bool:
        return id in self._by_ids

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stores):
            return NotImplemented
        return set(self) == set(other)

    def __hash__(self) -> int:
        return hash(frozenset(self))

    def __repr__(self) -> str:
        return f"Stores({list(self)!r})"
