"""
용어 하이라이트 Service

Builds a dictionary snapshot, runs the term matcher and renders the
highlighted markup plus the detected-term summary.
"""

import logging
from typing import Any, Dict, Optional, Sequence

from sqlalchemy.orm import Session

from agent.term_detection.models import Term
from agent.term_detection.term_matcher_agent import TermMatcherAgent
from app.core.markup import render_highlighted_html, render_term_cards_html
from app.services.dictionary_service import DictionaryService

logger = logging.getLogger(__name__)


class HighlightService:
    """
    하이라이트 비즈니스 로직

    책임:
    - 용어 사전 snapshot 생성 (built-in + custom)
    - TermMatcherAgent 호출
    - 결과를 HTML 및 요약으로 변환
    """

    def __init__(self, db: Session):
        self.dictionary = DictionaryService(db)
        self.term_matcher = TermMatcherAgent()

    def highlight(
        self,
        text: str,
        dictionary: Optional[Sequence[Term]] = None
    ) -> Dict[str, Any]:
        """
        Detect terms in text and render them.

        Args:
            text: Source text
            dictionary: Term snapshot to use instead of built-in + custom

        Returns:
            Dictionary containing:
                - html: escaped output with highlighted spans
                - summary_html: detected term cards
                - matches: TermMatch list sorted by position
                - terms: unique detected terms (first-seen order)
                - terms_count / matches_count
        """
        snapshot = dictionary if dictionary is not None else self.dictionary.build_snapshot()
        logger.info(f"📥 하이라이트 요청: {len(text)}자, 용어 사전 {len(snapshot)}개")

        matches = self.term_matcher.process(text, snapshot)
        terms = self.term_matcher.summarize(matches)

        if not matches:
            logger.info("専門用語が検出されませんでした")
        else:
            logger.info(f"✅ {len(terms)} 個の専門用語を検出 ({len(matches)} matches)")

        return {
            "html": render_highlighted_html(text, matches),
            "summary_html": render_term_cards_html(terms),
            "matches": matches,
            "terms": terms,
            "terms_count": len(terms),
            "matches_count": len(matches),
        }
