"""Shared utilities: logging, paths and timestamps."""
