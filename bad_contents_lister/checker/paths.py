"""Mapping between data tickets and store relative paths.

A ticket is rendered as 8 hex digits split in 4 directory levels, which
bounds each directory to 256 entries: ticket ``0x00017a2b`` lives at
``00/01/7a/2b``.
"""

import string
from collections.abc import Sequence

TICKET_MASK = 0xFFFFFFFF
HEX_DIGITS = frozenset(string.hexdigits)


def path_of(ticket: int) -> tuple[str, str, str, str]:
    """Get the path segments of a ticket.

    Args:
        ticket: 32 bits ticket, signed values use their unsigned representation

    Returns:
        The four 2-character hex segments
    """
    digits = f"{ticket & TICKET_MASK:08x}"
    return (digits[0:2], digits[2:4], digits[4:6], digits[6:8])


def relative_path(ticket: int, extension: str | None = None) -> str:
    """Get the store relative path of a ticket's file.

    Args:
        ticket: 32 bits ticket
        extension: Extension (with its leading dot) appended to the file name

    Returns:
        The '/' separated relative path
    """
    return "/".join(path_of(ticket)) + (extension or "")


def ticket_of(segments: Sequence[str]) -> int:
    """Parse path segments back to the unsigned ticket.

    Raises:
        ValueError: If the segments are not four 2-digit hex values
    """
    if len(segments) != 4 or any(
        len(segment) != 2 or not set(segment) <= HEX_DIGITS for segment in segments
    ):
        raise ValueError(f"expecting four 2-digit hex segments, got {segments!r}")
    return int("".join(segments), 16)
