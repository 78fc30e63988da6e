"""Utility functions."""

from .query import form_array, serialize_query, serialize_value

__all__ = ["serialize_query", "serialize_value", "form_array"]
