"""
Dictionary service.

Builds the immutable (built-in + custom) dictionary snapshot handed to the
matcher, and serves the dictionary browse view.
"""
import logging
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from agent.term_detection.models import Term
from app.core.ir_dictionary import BUILTIN_TERMS
from app.core.term_cache import term_cache, CUSTOM_TERMS_KEY
from app.models.term import CustomTerm

logger = logging.getLogger(__name__)


class DictionaryService:
    """
    Read side of the dictionary.

    책임:
    - 커스텀 용어 조회 (캐싱 적용)
    - built-in + custom snapshot 생성
    - 검색 / 카테고리 필터
    """

    def __init__(self, db: Session, builtin_terms: Tuple[Term, ...] = BUILTIN_TERMS):
        self.db = db
        self.builtin_terms = builtin_terms
        self._term_cache = term_cache

    def get_custom_terms(self, use_cache: bool = True) -> Tuple[Term, ...]:
        """
        Server-managed custom terms in insertion order.

        Performance:
            - 캐시 히트 시: no query
            - 캐시 미스 시: one query, result cached
        """
        if use_cache:
            cached = self._term_cache.get(CUSTOM_TERMS_KEY)
            if cached is not None:
                return cached

        rows = (
            self.db.query(CustomTerm)
            .order_by(CustomTerm.added_at, CustomTerm.id)
            .all()
        )
        terms = tuple(row.to_term() for row in rows)

        if use_cache:
            self._term_cache.set(CUSTOM_TERMS_KEY, terms)
        logger.debug(f"📚 커스텀 용어 조회: {len(terms)}개")
        return terms

    def build_snapshot(self) -> Tuple[Term, ...]:
        """Immutable dictionary for one match call: built-in first, then custom."""
        snapshot = self.builtin_terms + self.get_custom_terms()
        logger.debug(f"Dictionary snapshot: {len(self.builtin_terms)} built-in + {len(snapshot) - len(self.builtin_terms)} custom")
        return snapshot

    def find_by_en(self, en: str, exclude_id: Optional[str] = None) -> Optional[Term]:
        """
        Existing term with the same English phrase (case-insensitive).

        Args:
            en: English phrase
            exclude_id: Custom term id to ignore (the term being updated)
        """
        key = en.strip().lower()
        for term in self.builtin_terms:
            if term.key == key:
                return term
        for term in self.get_custom_terms():
            if term.key == key and term.id != exclude_id:
                return term
        return None

    def search(
        self,
        query: Optional[str] = None,
        category: Optional[str] = None
    ) -> Tuple[List[Term], int]:
        """
        Filter the full dictionary for the browse view.

        Args:
            query: Case-insensitive substring of en, ja, note or reference
            category: Category key to keep

        Returns:
            (terms sorted by en, total dictionary size)
        """
        snapshot = self.build_snapshot()
        filtered = list(snapshot)

        if category:
            filtered = [t for t in filtered if t.category == category]

        needle = (query or "").strip().lower()
        if needle:
            filtered = [
                t for t in filtered
                if needle in t.en.lower()
                or needle in t.ja.lower()
                or needle in (t.note or "").lower()
                or needle in (t.reference or "").lower()
            ]

        filtered.sort(key=lambda t: t.en.lower())
        return filtered, len(snapshot)
