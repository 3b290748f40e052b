"""Database engine creation."""

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url

from bad_contents_lister.core.config import DatabaseConfig


def create_db_engine(config: DatabaseConfig, password: str | None = None) -> Engine:
    """Create the engine connecting to the repository database.

    The user of the configuration, and the password if any, override the
    credentials the URL may carry.

    Args:
        config: Database configuration
        password: Password to use, defaults to the configured one

    Returns:
        The matching engine
    """
    if password is None and config.password is not None:
        password = config.password.get_secret_value()

    url = make_url(config.url).set(username=config.user)
    if password is not None:
        url = url.set(password=password)

    return create_engine(url, pool_pre_ping=True, echo=False)
