"""
Input parsing utilities.

This package contains code for reading the scraped articles file.
"""

from .json_parser import InputError, load_articles, parse_articles

__all__ = ["InputError", "load_articles", "parse_articles"]
