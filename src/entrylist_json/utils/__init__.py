"""Utility functions for the entry list converter."""

from .validation import ValidationUtils, load_json

__all__ = ["ValidationUtils", "load_json"]
