"""Shared helpers for gps commands."""
