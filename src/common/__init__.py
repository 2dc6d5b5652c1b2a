"""Shared helpers used across the update and replacement packages."""
