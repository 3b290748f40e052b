"""Reporting of the audit outcome."""

from bad_contents_lister.report.progress import ProgressReporter
from bad_contents_lister.report.writer import ReportWriter, report_name

__all__ = ["ProgressReporter", "ReportWriter", "report_name"]
