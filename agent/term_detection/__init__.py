"""
용어 탐지 Agent 모듈

텍스트에서 전문용어를 탐지하는 Micro Agent

- TermMatcherAgent: longest-match-first 용어 탐지 + 고유 용어 요약
  - 단어 경계 체크: "state" 는 "the state actor" 에서만 매칭, "statesman" 에서는 매칭 안 됨
"""

from .models import Term, TermMatch
from .term_matcher_agent import (
    TermMatcherAgent,
    match_terms,
    summarize_terms,
    rank_terms,
    has_word_boundaries,
    BOUNDARY_PUNCTUATION,
)

__all__ = [
    "Term",
    "TermMatch",
    "TermMatcherAgent",
    "match_terms",
    "summarize_terms",
    "rank_terms",
    "has_word_boundaries",
    "BOUNDARY_PUNCTUATION",
]
