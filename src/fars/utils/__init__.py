"""Shared helpers for the FARS toolkit (logging setup)."""
