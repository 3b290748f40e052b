"""Value model of the lister."""

from bad_contents_lister.models.content import Content, DecoratedContent, Parent
from bad_contents_lister.models.store import Store, Stores

__all__ = [
    "Content",
    "DecoratedContent",
    "Parent",
    "Store",
    "Stores",
]
