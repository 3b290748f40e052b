"""One audit run: check every content of the repository and report failures."""

from collections import Counter
from collections.abc import Callable, Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from itertools import islice

from sqlalchemy import Connection

from bad_contents_lister.checker import Code, ContentChecker, Result
from bad_contents_lister.core.errors import MissingStoreError
from bad_contents_lister.core.logging import get_logger
from bad_contents_lister.core.timing import Stopwatch, human_duration
from bad_contents_lister.database import (
    iter_decorated_contents,
    read_storage_ids,
    read_stores,
)
from bad_contents_lister.models import DecoratedContent
from bad_contents_lister.report import ProgressReporter, ReportWriter

logger = get_logger(module="runner")

# contents checked per batch and per worker when checking concurrently
BATCH_PER_WORKER = 64


@dataclass
class AuditSummary:
    """Outcome of an audit run."""

    count: int = 0
    stats: Counter[Code] = field(default_factory=Counter)
    elapsed: int = 0  # nanoseconds

    @property
    def failures(self) -> int:
        return self.count - self.stats[Code.OK]

    def format_stats(self) -> str:
        """Render the count of each code, in code order."""
        return "[" + ", ".join(f"{code} x {self.stats[code]}" for code in Code) + "]"


def _check_all(
    checker: Callable[[DecoratedContent], Result],
    contents: Iterable[DecoratedContent],
    workers: int,
) -> Iterator[tuple[DecoratedContent, Result]]:
    """Check contents, in input order, on a thread pool when workers > 1."""
    if workers <= 1:
        for dc in contents:
            yield dc, checker(dc)
        return

    iterator = iter(contents)
    with ThreadPoolExecutor(max_workers=workers) as executor:
        while batch := list(islice(iterator, workers * BATCH_PER_WORKER)):
            yield from zip(batch, executor.map(checker, batch))


def audit(
    contents: Iterable[DecoratedContent],
    checker: Callable[[DecoratedContent], Result],
    writer: ReportWriter,
    progress: ProgressReporter | None = None,
    workers: int = 1,
) -> AuditSummary:
    """Check contents, reporting the failed ones.

    Args:
        contents: Contents to check
        checker: Verifies one content
        writer: Receives the failed verifications
        progress: Receives every verification, if any
        workers: Number of threads checking contents

    Returns:
        The count of contents per code
    """
    summary = AuditSummary(stats=Counter({code: 0 for code in Code}))
    with Stopwatch() as watch:
        for dc, result in _check_all(checker, contents, workers):
            summary.count += 1
            summary.stats[result.code] += 1
            if progress is not None:
                progress.on_result(result)
            if result.code is not Code.OK:
                writer.write_error(dc, result)
        if progress is not None:
            progress.finish()
    summary.elapsed = watch.elapsed
    return summary


def run_audit(
    conn: Connection,
    writer: ReportWriter,
    progress: ProgressReporter | None = None,
    schema: str = "dbo",
    workers: int = 1,
) -> AuditSummary:
    """Audit the whole repository.

    Stores are loaded, and the store of every content checked against
    them, so that configuration errors abort the run before any check.

    Args:
        conn: Connection to the repository database
        writer: Receives the failed verifications
        progress: Receives every verification, if any
        schema: Owner of the repository tables
        workers: Number of threads checking contents

    Returns:
        The count of contents per code

    Raises:
        DuplicateStoreError: If two stores share an id or a name
        MissingStoreError: If a content's store is unknown
    """
    with Stopwatch() as watch:
        stores = read_stores(conn, schema)
    logger.info("stores_loaded", count=len(stores), elapsed=str(watch))

    unknown = [id for id in sorted(read_storage_ids(conn, schema)) if id not in stores]
    if unknown:
        raise MissingStoreError(f"there is no store matching id {', '.join(unknown)}")

    checker = ContentChecker(stores)
    summary = audit(
        iter_decorated_contents(conn, stores, schema),
        checker,
        writer,
        progress=progress,
        workers=workers,
    )
    logger.info(
        "audit_finished",
        count=summary.count,
        failures=summary.failures,
        elapsed=human_duration(summary.elapsed),
        stats={code.value: summary.stats[code] for code in Code},
    )
    return summary
