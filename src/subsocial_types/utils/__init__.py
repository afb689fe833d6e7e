"""Utility helpers for subsocial-types."""
