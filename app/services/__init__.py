"""
Services package for business logic.

Service classes orchestrate Agent calls, handle DB operations,
and implement business logic that doesn't belong in API endpoints.
"""
from .dictionary_service import DictionaryService
from .term_service import TermService, DuplicateTermError, TermNotFoundError
from .highlight_service import HighlightService

__all__ = [
    "DictionaryService",
    "TermService",
    "DuplicateTermError",
    "TermNotFoundError",
    "HighlightService",
]
