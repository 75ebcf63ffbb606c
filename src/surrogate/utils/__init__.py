"""Shared helpers: errors, logging and character tables."""
