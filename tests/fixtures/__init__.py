"""Test fixture package for bad-contents-lister.

Contains fixtures for:
- Contents, parents and stores
- The repository database (SQLite) and its store directories
"""

from .contents import STORE_ID, decorate, make_content, store_dir, stores
from .repository import repository, repository_conn, repository_engine

__all__ = [
    # Contents
    "STORE_ID",
    "decorate",
    "make_content",
    "store_dir",
    "stores",
    # Repository
    "repository",
    "repository_conn",
    "repository_engine",
]
