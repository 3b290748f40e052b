"""Readers turning repository tables into stores and decorated contents."""

import sys
import time
from collections.abc import Iterator
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import Connection, CursorResult, text

from bad_contents_lister.checker.extensions import ExtensionResolver
from bad_contents_lister.core.logging import get_logger
from bad_contents_lister.core.timing import human_duration
from bad_contents_lister.models import (
    Content,
    DecoratedContent,
    Parent,
    Store,
    Stores,
)

logger = get_logger(module="database_readers")

# the storage id of contents held outside file stores
NO_STORAGE_ID = "0000000000000000"

STORES_SQL = """
SELECT f.r_object_id, f.root, f.use_extensions, l.file_system_path
FROM {schema}.dm_filestore_s f
 INNER JOIN {schema}.dm_location_sv l ON (l.object_name = f.root)
"""

FORMATS_SQL = """
SELECT name, dos_extension
FROM {schema}.dm_format_s
WHERE (dos_extension IS NOT NULL AND dos_extension <> ' ')
"""

# Parent's metadata consists in:
#  r.parent_id: the parent's r_object_id
#  d.object_name: the object's name
#  d.r_object_type: the object's type name
#  d.i_has_folder: greater than 0 if it is the current version
CONTENTS_SQL = """
SELECT s.storage_id, s.data_ticket, r.parent_id, s.full_format,
 r.page, s.rendition, s.content_size, s.set_time,
 d.object_name, d.r_object_type, d.i_has_folder
FROM {schema}.dmr_content_s s
 INNER JOIN {schema}.dmr_content_r r ON (r.r_object_id = s.r_object_id)
 INNER JOIN {schema}.dm_sysobject_s d ON (r.parent_id = d.r_object_id)
WHERE s.storage_id != :no_storage
ORDER BY s.storage_id, s.data_ticket
"""

STORAGE_IDS_SQL = """
SELECT DISTINCT s.storage_id
FROM {schema}.dmr_content_s s
WHERE s.storage_id != :no_storage
"""


def _execute(
    conn: Connection, sql: str, params: dict[str, Any] | None = None, stream: bool = False
) -> CursorResult[Any]:
    """Execute a query, logging the time it took."""
    statement = text(sql)
    if stream:
        statement = statement.execution_options(stream_results=True)
    start = time.perf_counter_ns()
    result = conn.execute(statement, params or {})
    logger.info(
        "query_executed",
        elapsed=human_duration(time.perf_counter_ns() - start),
        sql=" ".join(sql.split()),
    )
    return result


def read_stores(conn: Connection, schema: str = "dbo") -> Stores:
    """Read the file stores of the repository.

    Args:
        conn: Database connection
        schema: Owner of the repository tables

    Returns:
        The stores

    Raises:
        DuplicateStoreError: If two stores share an id or a name
    """
    stores = [
        Store.create(
            id=str(row[0]).strip(),
            name=str(row[1]).strip(),
            base_path=str(row[3]).strip(),
            extension=_flag(row[2]),
        )
        for row in _execute(conn, STORES_SQL.format(schema=schema))
    ]
    return Stores(stores)


def read_storage_ids(conn: Connection, schema: str = "dbo") -> frozenset[str]:
    """Read the identifiers of the stores holding contents."""
    return frozenset(
        str(storage_id).strip()
        for (storage_id,) in _execute(
            conn, STORAGE_IDS_SQL.format(schema=schema), {"no_storage": NO_STORAGE_ID}
        )
    )


def read_extensions(conn: Connection, schema: str = "dbo") -> dict[str, str]:
    """Read the extension of each format that has one.

    Args:
        conn: Database connection
        schema: Owner of the repository tables

    Returns:
        Format name to extension, with its leading dot
    """
    extensions: dict[str, str] = {}
    for name, extension in _execute(conn, FORMATS_SQL.format(schema=schema)):
        extension = (extension or "").strip()
        if extension:
            extensions[name] = "." + extension
    return extensions


def _flag(value: Any) -> bool:
    """Read a flag column: true when strictly positive."""
    if value is None:
        return False
    if isinstance(value, str):
        value = value.strip().lower()
        if value in ("t", "true", "y", "yes"):
            return True
        return value.lstrip("-").isdigit() and int(value) > 0
    return int(value) > 0


def to_utc(value: datetime | str) -> datetime:
    """Normalize a database timestamp to an aware UTC datetime.

    Naive timestamps are taken as UTC. Some drivers (SQLite) return text.
    """
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class DecoratedContentReader:
    """Convert content rows into decorated contents."""

    def __init__(self, extensions: ExtensionResolver):
        self.extensions = extensions

    def read(self, row: Any) -> DecoratedContent:
        """Build the decorated content of a row of CONTENTS_SQL."""
        store = str(row[0]).strip()
        fmt = str(row[3]).strip()
        content = Content(
            store=store,
            ticket=int(row[1]),
            parent=str(row[2]).strip(),
            rendition=_flag(row[5]),
            format=fmt,
            page=int(row[4]),
            # resolved once per record, while decorating it
            extension=self.extensions.resolve(store, fmt),
            size=int(row[6]),
            modified=to_utc(row[7]),
        )
        parent = Parent(
            id=content.parent,
            name=row[8] or "",
            type=sys.intern(str(row[9]).strip()),
            current=_flag(row[10]),
        )
        return DecoratedContent(content=content, parent=parent)


def iter_decorated_contents(
    conn: Connection, stores: Stores, schema: str = "dbo"
) -> Iterator[DecoratedContent]:
    """Stream the contents of the repository with their parent's metadata.

    Extensions are only resolved for stores using them and formats having one.

    Args:
        conn: Database connection
        stores: Stores of the repository
        schema: Owner of the repository tables

    Yields:
        Decorated contents, ordered by store then ticket
    """
    resolver = ExtensionResolver(stores.with_extensions(), read_extensions(conn, schema))
    reader = DecoratedContentReader(resolver)
    result = _execute(
        conn,
        CONTENTS_SQL.format(schema=schema),
        {"no_storage": NO_STORAGE_ID},
        stream=True,
    )
    try:
        for row in result:
            yield reader.read(row)
    finally:
        result.close()
