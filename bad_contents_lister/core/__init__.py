"""Configuration, logging and shared utilities."""
