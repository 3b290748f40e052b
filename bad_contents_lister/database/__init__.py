"""Access to the repository database."""

from bad_contents_lister.database.connection import create_db_engine
from bad_contents_lister.database.readers import (
    DecoratedContentReader,
    iter_decorated_contents,
    read_extensions,
    read_storage_ids,
    read_stores,
)

__all__ = [
    "DecoratedContentReader",
    "create_db_engine",
    "iter_decorated_contents",
    "read_extensions",
    "read_storage_ids",
    "read_stores",
]
