"""Shared helpers and logging setup."""
