"""Test configuration."""

from pathlib import Path

import pytest

from bad_contents_lister.core.logging import configure_logging

pytest_plugins: list[str] = [
    "tests.fixtures.contents",
    "tests.fixtures.repository",
]

# Configure logging for tests
configure_logging(testing=True)

SETTINGS_VARIABLES = (
    "BCL_LOG_LEVEL",
    "BCL_JSON_LOGS",
    "BCL_REPORT_DIR",
    "BCL_REPORT_SEPARATOR",
    "BCL_PROGRESS_INCREMENT",
    "BCL_PROGRESS_STEPS",
    "BCL_CHECK_WORKERS",
    "BCL_DB_PASSWORD",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep settings from leaking in from the environment or a .env file."""
    for name in SETTINGS_VARIABLES:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
