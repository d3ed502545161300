"""
용어 탐지 데이터 모델 (Term detection data models)

Dictionary entries and located matches shared by the matcher, the
markup builder and the services.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Term:
    """
    A dictionary entry: English source phrase and its Japanese translation.

    Attributes:
        en: English phrase searched for in the text (required, non-empty)
        ja: Japanese translation shown on hover (required, non-empty)
        category: Key into the category registry ("custom" if unknown)
        note: Short explanation shown under the translation
        reference: Citation for the term (author, work, year)
        id: Storage id for server-managed terms, None for built-in ones
    """
    en: str
    ja: str
    category: str = "custom"
    note: str = ""
    reference: str = ""
    id: Optional[str] = None

    @property
    def key(self) -> str:
        """Case-insensitive identity of the term."""
        return self.en.lower()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Term":
        return cls(
            en=data["en"],
            ja=data["ja"],
            category=data.get("category") or "custom",
            note=data.get("note") or "",
            reference=data.get("reference") or "",
            id=data.get("id"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class TermMatch:
    """
    탐지된 용어 (a located occurrence of a term)

    Attributes:
        start: Start offset in the source text (inclusive)
        end: End offset in the source text (exclusive)
        term: Dictionary entry that matched
        original_text: The source substring with its original casing
    """
    start: int
    end: int
    term: Term
    original_text: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "start": self.start,
            "end": self.end,
            "original_text": self.original_text,
            "term": self.term.to_dict(),
        }
