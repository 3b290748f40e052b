#!/usr/bin/env python3
"""Command line of the bad contents lister."""

from enum import IntEnum
from pathlib import Path
from typing import NoReturn

import click
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from bad_contents_lister import __version__
from bad_contents_lister.core.config import (
    DatabaseConfig,
    Settings,
    load_database_config,
)
from bad_contents_lister.core.errors import ConfigFileError, ConfigurationError
from bad_contents_lister.core.logging import configure_logging, get_logger
from bad_contents_lister.core.timing import Stopwatch
from bad_contents_lister.database import create_db_engine
from bad_contents_lister.report import ProgressReporter, ReportWriter
from bad_contents_lister.runner import AuditSummary, run_audit

logger = get_logger(module="cli")

CONTEXT_SETTINGS = {"help_option_names": ["-H", "--help"]}


class RetCode(IntEnum):
    """Exit status of the command."""

    OK = 0
    FILE_NOT_FOUND = 1
    UNREADABLE_FILE = 2
    BAD_CONFIG = 3
    SQL_ERROR = 4
    CANCELLED = 5
    OTHER = 6


def _fail(ctx: click.Context, code: RetCode, message: str) -> NoReturn:
    click.echo(f"error: {message}", err=True)
    click.echo(ctx.get_usage(), err=True)
    ctx.exit(code)


def _password(config: DatabaseConfig, settings: Settings) -> str:
    """Get the database password, prompting for it as a last resort."""
    if config.password is not None:
        return config.password.get_secret_value()
    if settings.DB_PASSWORD is not None:
        return settings.DB_PASSWORD.get_secret_value()
    return click.prompt(f"password for {config.user}", hide_input=True)


def _audit(
    config: DatabaseConfig,
    password: str,
    settings: Settings,
    output_dir: Path,
    workers: int,
) -> AuditSummary:
    engine = create_db_engine(config, password)
    try:
        with Stopwatch() as total:
            with Stopwatch() as connecting:
                conn = engine.connect()
            click.echo(f"connected in {connecting}")
            with conn:
                output_dir.mkdir(parents=True, exist_ok=True)
                with ReportWriter.open(
                    output_dir, config.user, settings.REPORT_SEPARATOR
                ) as writer:
                    click.echo(f"logging into {writer.path}")
                    progress = ProgressReporter(
                        settings.PROGRESS_INCREMENT, settings.PROGRESS_STEPS
                    )
                    summary = run_audit(
                        conn,
                        writer,
                        progress,
                        schema=config.schema_name,
                        workers=workers,
                    )
                    click.echo(f"reported {writer.written} failed contents")
        click.echo(f"checked {summary.count} contents in {total}")
        return summary
    finally:
        engine.dispose()


@click.command(context_settings=CONTEXT_SETTINGS)
@click.option(
    "-C",
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    help="XML file holding the <jdbc> database configuration",
)
@click.option(
    "--output-dir",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Directory the report is written to (default: BCL_REPORT_DIR)",
)
@click.option(
    "-W",
    "--workers",
    type=click.IntRange(min=1),
    default=None,
    help="Number of threads checking files (default: BCL_CHECK_WORKERS)",
)
@click.option("-v", "--verbose", is_flag=True, help="Log at debug level")
@click.version_option(__version__, "-V", "--version")
@click.pass_context
def main(
    ctx: click.Context,
    config_path: Path | None,
    output_dir: Path | None,
    workers: int | None,
    verbose: bool,
) -> None:
    """List the contents whose file is missing or does not have the expected size.

    The failed contents are written to a report named after the database
    user, in the output directory.
    """
    if config_path is None:
        click.echo(ctx.get_help())
        ctx.exit(RetCode.OK)

    try:
        settings = Settings()
    except ValidationError as e:
        _fail(ctx, RetCode.BAD_CONFIG, f"invalid settings: {e}")

    configure_logging(
        level="debug" if verbose else settings.LOG_LEVEL,
        json_logs=settings.JSON_LOGS,
    )

    try:
        config = load_database_config(config_path)
    except FileNotFoundError:
        _fail(ctx, RetCode.FILE_NOT_FOUND, f"config file not found: {config_path}")
    except OSError as e:
        _fail(ctx, RetCode.UNREADABLE_FILE, f"cannot read config file: {e}")
    except ConfigFileError as e:
        _fail(ctx, RetCode.BAD_CONFIG, f"bad config file {config_path}: {e}")

    try:
        password = _password(config, settings)
    except click.Abort:
        _fail(ctx, RetCode.CANCELLED, "cancelled")

    try:
        summary = _audit(
            config,
            password,
            settings,
            output_dir if output_dir is not None else settings.REPORT_DIR,
            workers if workers is not None else settings.CHECK_WORKERS,
        )
    except KeyboardInterrupt:
        _fail(ctx, RetCode.CANCELLED, "cancelled")
    except SQLAlchemyError as e:
        logger.error("database_error", error=str(e))
        _fail(ctx, RetCode.SQL_ERROR, f"database error: {e}")
    except ConfigurationError as e:
        logger.error("configuration_error", error=str(e))
        _fail(ctx, RetCode.OTHER, str(e))
    except Exception as e:
        logger.exception("audit_failed", error=str(e))
        _fail(ctx, RetCode.OTHER, f"unexpected error: {e}")

    click.echo(f"stats: {summary.format_stats()}")
    click.echo("bye")


if __name__ == "__main__":
    main()
