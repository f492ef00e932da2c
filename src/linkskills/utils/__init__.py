"""Utility helpers."""

from .naming import suggest_name

__all__ = ["suggest_name"]
