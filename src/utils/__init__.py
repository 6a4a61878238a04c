"""Shared helpers for the dirsize CLI."""
