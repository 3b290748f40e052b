"""Tests for stores and the store registry."""

from pathlib import Path

import pytest

from bad_contents_lister.core.errors import (
    ConfigurationError,
    DuplicateStoreError,
    MissingStoreError,
)
from bad_contents_lister.models import Store, Stores


def store(id: str = "2800000180000100", name: str = "filestore_01", extension: bool = False) -> Store:
    return Store.create(id, name, Path("/data/docbase") / name, extension)


class TestStore:
    """Test cases for Store."""

    def test_should_append_docbase_directory(self):
        """The store path should end with the zero padded docbase id."""
        created = Store.create("280001a480000100", "filestore_01", "/data/fs1", True)

        assert created.path == Path("/data/fs1/000001a4")
        assert created.extension is True

    def test_should_reject_short_ids(self):
        """An id too short to carry a docbase id should be rejected."""
        with pytest.raises(ValueError):
            Store.create("2800001", "filestore_01", "/data/fs1", False)


class TestStores:
    """Test cases for Stores."""

    @pytest.fixture
    def registry(self) -> Stores:
        return Stores(
            [
                store(),
                store("2800000180000200", "filestore_02", extension=True),
            ]
        )

    def test_should_look_stores_up_by_id_and_name(self, registry):
        """Stores should be found by id and by name."""
        assert registry.by_id("2800000180000100").name == "filestore_01"
        assert registry.by_name("filestore_02").id == "2800000180000200"
        assert registry.name_of("2800000180000200") == "filestore_02"
        assert registry.id_of("filestore_01") == "2800000180000100"

    def test_should_raise_on_missing_store(self, registry):
        """Failed lookups should raise MissingStoreError."""
        with pytest.raises(MissingStoreError):
            registry.by_id("2800000180000300")
        with pytest.raises(MissingStoreError):
            registry.by_name("filestore_03")
        with pytest.raises(LookupError):
            registry.name_of("2800000180000300")

    def test_should_reject_duplicate_ids(self):
        """Two stores sharing an id should be rejected."""
        with pytest.raises(DuplicateStoreError, match="id"):
            Stores([store(), store(name="other")])

    def test_should_reject_duplicate_names(self):
        """Two stores sharing a name should be rejected."""
        with pytest.raises(DuplicateStoreError, match="name") as exc_info:
            Stores([store(), store(id="2800000180000200")])
        assert isinstance(exc_info.value, ConfigurationError)

    def test_should_list_stores_with_extensions(self, registry):
        """Only stores using extensions should be listed."""
        assert registry.with_extensions() == frozenset({"2800000180000200"})

    def test_should_behave_as_a_collection(self, registry):
        """Stores should be iterable, sized and support membership."""
        assert len(registry) == 2
        assert [s.name for s in registry] == ["filestore_01", "filestore_02"]
        assert "2800000180000100" in registry
        assert "filestore_01" not in registry

    def test_should_expose_read_only_views(self, registry):
        """The id and name views should not be writable."""
        with pytest.raises(TypeError):
            registry.by_ids["x"] = store()  # type: ignore[index]
        assert set(registry.by_names) == {"filestore_01", "filestore_02"}

    def test_should_compare_by_content(self, registry):
        """Registries holding the same stores should be equal."""
        same = Stores(reversed(list(registry)))

        assert same == registry
        assert hash(same) == hash(registry)
        assert Stores([]) != registry
