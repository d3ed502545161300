"""
Core utilities for the IR translator backend.
Provides the built-in dictionary, category registry, markup rendering,
import/export formats and caching.
"""
from .categories import CATEGORIES, DEFAULT_CATEGORY, get_category, get_category_label, list_categories
from .ir_dictionary import BUILTIN_TERMS
from .markup import render_highlighted_html, render_term_cards_html, escape_text
from .term_io import parse_bulk_text, export_terms_csv
from .term_cache import term_cache, get_term_cache, TermCache, CUSTOM_TERMS_KEY

__all__ = [
    # Dictionary
    "BUILTIN_TERMS",
    "CATEGORIES",
    "DEFAULT_CATEGORY",
    "get_category",
    "get_category_label",
    "list_categories",
    # Markup
    "render_highlighted_html",
    "render_term_cards_html",
    "escape_text",
    # Import / export
    "parse_bulk_text",
    "export_terms_csv",
    # Caching
    "term_cache",
    "get_term_cache",
    "TermCache",
    "CUSTOM_TERMS_KEY",
]
