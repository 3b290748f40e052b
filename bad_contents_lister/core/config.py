"""Lister configuration."""

import xml.etree.ElementTree as ElementTree
from pathlib import Path
from typing import BinaryIO

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bad_contents_lister.core.errors import ConfigFileError

DEFAULT_SCHEMA = "dbo"
DEFAULT_TOP_ELEMENT = "jdbc"


class Settings(BaseSettings):
    """
    Lister settings.

    Environment variables (prefixed with ``BCL_``) will be loaded and
    validated using Pydantic.
    """

    # Logging Settings
    LOG_LEVEL: str = "info"
    JSON_LOGS: bool = True

    # Report Settings
    REPORT_DIR: Path = Path(".")
    REPORT_SEPARATOR: str = Field(default="|", min_length=1, max_length=1)

    # Progress Settings
    PROGRESS_INCREMENT: int = Field(default=1024, gt=0)
    PROGRESS_STEPS: int = Field(default=64, gt=0, le=100)

    # Checker Settings
    CHECK_WORKERS: int = Field(default=1, ge=1)

    # Database password used when the config file carries none
    DB_PASSWORD: SecretStr | None = None

    model_config = SettingsConfigDict(
        env_prefix="BCL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


class DatabaseConfig(BaseModel):
    """Information about the repository database to connect to."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(..., min_length=1, description="SQLAlchemy database URL")
    user: str = Field(..., min_length=1, description="Database user name")
    password: SecretStr | None = Field(
        default=None, description="Password, prompted for when absent"
    )
    schema_name: str = Field(
        default=DEFAULT_SCHEMA, min_length=1, description="Owner of the tables"
    )

    @field_validator("url", "user", "schema_name")
    @classmethod
    def strip_value(cls, value: str) -> str:
        """Trim surrounding whitespace."""
        stripped = value.strip()
        if not stripped:
            raise ValueError("value must not be blank")
        return stripped


def parse_database_config(
    source: BinaryIO, top: str = DEFAULT_TOP_ELEMENT
) -> DatabaseConfig:
    """Parse an XML document into a database configuration.

    The first element named ``top`` found anywhere in the document carries
    ``url``, ``user`` and optionally ``password`` and ``schema`` children.
    Unknown children are ignored.

    Args:
        source: Binary stream providing the XML document
        top: Local name of the element holding the configuration

    Returns:
        The matching database configuration

    Raises:
        ConfigFileError: If the document is malformed or incomplete
    """
    try:
        root = ElementTree.parse(source).getroot()
    except ElementTree.ParseError as e:
        raise ConfigFileError(f"malformed XML configuration: {e}") from e

    element = next(
        (node for node in root.iter() if _local_name(node.tag) == top), None
    )
    if element is None:
        raise ConfigFileError(f"there is no element '{top}' in supplied XML document")

    values: dict[str, str] = {}
    for child in element:
        name = _local_name(child.tag)
        if name in ("url", "user", "password", "schema") and name not in values:
            values[name] = (child.text or "").strip()

    for required in ("url", "user"):
        if not values.get(required):
            raise ConfigFileError(f"missing {required} element")

    try:
        return DatabaseConfig(
            url=values["url"],
            user=values["user"],
            password=values.get("password"),
            schema_name=values.get("schema") or DEFAULT_SCHEMA,
        )
    except ValueError as e:
        raise ConfigFileError(f"invalid database configuration: {e}") from e


def load_database_config(path: Path, top: str = DEFAULT_TOP_ELEMENT) -> DatabaseConfig:
    """Load the database configuration from an XML file.

    Args:
        path: Path to the XML file
        top: Local name of the element holding the configuration

    Returns:
        The matching database configuration
    """
    with open(path, "rb") as source:
        return parse_database_config(source, top)


def _local_name(tag: str) -> str:
    # drops any '{namespace}' prefix
    return tag.rsplit("}", 1)[-1]
