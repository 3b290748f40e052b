"""Audit of repository contents against the files of their stores."""

__version__ = "0.1.0"
