"""Fatal errors raised before or during an audit run.

Verification outcomes are never raised: they are returned as values by the
content checker. The exceptions below abort the whole run.
"""


class ConfigurationError(Exception):
    """Raised when the configuration of the run is inconsistent."""


class DuplicateStoreError(ConfigurationError):
    """Raised when two stores share an identifier or a name."""


class MissingStoreError(ConfigurationError, LookupError):
    """Raised when no store matches a store identifier or name."""


class ConfigFileError(ConfigurationError):
    """Raised when the database configuration file is invalid."""
