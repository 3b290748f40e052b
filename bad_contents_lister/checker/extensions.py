"""Resolution of the file extension of a content."""

from collections.abc import Iterable, Mapping
from types import MappingProxyType


class ExtensionResolver:
    """Resolve the extension a content's file carries in its store.

    Only stores configured to use extensions get one, and only for formats
    with a non empty extension.
    """

    def __init__(self, stores: Iterable[str], extensions: Mapping[str, str]):
        """Initialize the resolver.

        Args:
            stores: Identifiers of the stores using extensions
            extensions: Format name to extension (with its leading dot)
        """
        self.stores = frozenset(stores)
        self.extensions = MappingProxyType(dict(extensions))

    def resolve(self, store: str, format: str) -> str | None:
        """Get the extension of a format's file in a store.

        Args:
            store: Storage identifier
            format: Format name

        Returns:
            The extension if any
        """
        if store not in self.stores:
            return None
        return self.extensions.get(format) or None
