"""Best effort search of a content file stored under another extension.

A file may not match its canonical name on disk when the format's
extension changed since it was written, or when the store's extension
policy differs from the expected one. Files sharing the canonical base
name in the same directory are then considered.

The existence check and the directory scan are not atomic: when files
change during a run, results are snapshots.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from bad_contents_lister.core.logging import get_logger

logger = get_logger(module="fallback_finder")


@dataclass(frozen=True)
class Located:
    """Outcome of a file lookup.

    Attributes:
        path: The located file, or the canonical path when not found
        found: Whether a file was found
    """

    path: Path
    found: bool


def base_name(name: str) -> str:
    """Strip the trailing extension (after the last dot) of a file name."""
    dot = name.rfind(".")
    return name if dot == -1 else name[:dot]


class FallbackFinder:
    """Locate a content file, falling back on files sharing its base name."""

    def locate(self, path: Path) -> Located:
        """Locate the file of a canonical path.

        When the canonical path does not exist, regular files of the same
        directory whose base name matches the canonical one are candidates.
        A single candidate wins, otherwise the most recently modified one
        does (the first one in name order on ties).

        Args:
            path: Canonical path of the content file

        Returns:
            The located file
        """
        if path.exists():
            return Located(path, True)

        candidates = self._candidates(path)
        if not candidates:
            return Located(path, False)
        if len(candidates) == 1:
            return Located(candidates[0][0], True)

        found, modified = candidates[0]
        for candidate, candidate_modified in candidates[1:]:
            if candidate_modified > modified:
                found, modified = candidate, candidate_modified
        logger.debug(
            "fallback_candidates",
            path=str(path),
            count=len(candidates),
            selected=str(found),
        )
        return Located(found, True)

    def _candidates(self, path: Path) -> list[tuple[Path, int]]:
        """List (path, modification time) of the files matching the base name."""
        name = path.name
        match = base_name(name)
        directory = path.parent
        candidates: list[tuple[Path, int]] = []
        try:
            with os.scandir(directory) as entries:
                for entry in sorted(entries, key=lambda e: e.name):
                    if entry.name == name or base_name(entry.name) != match:
                        continue
                    if not entry.is_file():
                        continue
                    candidates.append((Path(entry.path), self._modified(entry)))
        except FileNotFoundError:
            # no directory, no file
            return []
        except OSError as e:
            logger.warning(
                "fallback_scan_failed",
                directory=str(directory),
                error=str(e),
            )
            return []
        return candidates

    @staticmethod
    def _modified(entry: os.DirEntry[str]) -> int:
        try:
            return entry.stat().st_mtime_ns
        except OSError as e:
            logger.debug("fallback_stat_failed", path=entry.path, error=str(e))
            return 0


def locate(path: Path) -> Located:
    """Locate a content file with a default finder."""
    return FallbackFinder().locate(path)
