"""Models package."""
from app.models.term import CustomTerm

__all__ = [
    "CustomTerm",
]
