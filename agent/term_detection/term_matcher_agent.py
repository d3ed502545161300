"""
용어 매칭 Agent (Term Matcher Agent)

텍스트 + 용어 사전 -> 겹치지 않는 용어 매칭 리스트.

Longest-match-first scanning:
1. Rank terms by English phrase length (longest first)
2. Case-insensitive forward scan for every literal occurrence
3. Word-boundary check on both sides of the occurrence
4. Drop occurrences overlapping an already accepted match
5. Sort accepted matches by position

The matcher is a pure function of (text, dictionary). It never raises on
empty input and never mutates the dictionary, so it can be shared between
concurrent requests.
"""

import logging
from typing import Dict, Iterable, List, Sequence, Set, Tuple

from .models import Term, TermMatch

logger = logging.getLogger(__name__)

# Characters accepted right outside a match, besides whitespace
BOUNDARY_PUNCTUATION = frozenset(",.;:!?()[]{}\"'-/")


def _fold_char(char: str) -> str:
    folded = char.casefold()
    if len(folded) == 1:
        return folded
    lowered = char.lower()
    return lowered if len(lowered) == 1 else char


def fold_case(value: str) -> str:
    """
    Case-fold a string one character at a time, without changing its length.

    Text and terms go through the same per-character fold, so "ς" and "Σ"
    compare equal wherever they appear. Characters whose folded form is
    longer ("ß" -> "ss", "İ" -> "i̇") fall back to lower() or stay as-is.
    """
    return "".join(_fold_char(c) for c in value)


def is_boundary_char(char: str) -> bool:
    """True for whitespace or one of the boundary punctuation characters."""
    return char.isspace() or char in BOUNDARY_PUNCTUATION


def has_word_boundaries(text: str, start: int, end: int) -> bool:
    """
    Check the characters immediately outside text[start:end].

    Text edges count as boundaries.
    """
    if start > 0 and not is_boundary_char(text[start - 1]):
        return False
    if end < len(text) and not is_boundary_char(text[end]):
        return False
    return True


def rank_terms(dictionary: Iterable[Term]) -> List[Term]:
    """
    Order terms for scanning: longest `en` first.

    Equal-length terms are ordered by lower-cased `en`, then by their
    position in the dictionary.
    """
    indexed: List[Tuple[int, Term]] = list(enumerate(dictionary))
    indexed.sort(key=lambda item: (-len(item[1].en), item[1].en.lower(), item[0]))
    return [term for _, term in indexed]


def match_terms(text: str, dictionary: Sequence[Term]) -> List[TermMatch]:
    """
    Find all non-overlapping, boundary-respecting term occurrences.

    Args:
        text: Source text (may be empty)
        dictionary: Immutable snapshot of terms (built-in + custom)

    Returns:
        Matches sorted by start offset, pairwise non-overlapping
    """
    if not text or not dictionary:
        return []

    search_text = fold_case(text)
    text_length = len(search_text)

    matches: List[TermMatch] = []
    matched_positions: Set[int] = set()

    for term in rank_terms(dictionary):
        if not term.en:
            logger.debug("Skipping term with empty 'en'")
            continue

        needle = fold_case(term.en)
        term_length = len(needle)
        search_start = 0

        while search_start < text_length:
            idx = search_text.find(needle, search_start)
            if idx == -1:
                break
            # 같은 용어의 겹치는 출현도 검사하도록 한 글자씩 전진
            search_start = idx + 1

            end = idx + term_length
            if not has_word_boundaries(search_text, idx, end):
                continue

            current_range = range(idx, end)
            if any(pos in matched_positions for pos in current_range):
                continue

            matched_positions.update(current_range)
            matches.append(TermMatch(
                start=idx,
                end=end,
                term=term,
                original_text=text[idx:end],
            ))

    matches.sort(key=lambda m: m.start)
    logger.debug(f"Term matching: {len(matches)} matches ({len(dictionary)} terms, {len(text)} chars)")
    return matches


def summarize_terms(matches: Iterable[TermMatch]) -> List[Term]:
    """
    Unique terms of a match list, first occurrence wins.

    Terms are deduplicated by lower-cased `en`.
    """
    unique: Dict[str, Term] = {}
    for match in matches:
        unique.setdefault(match.term.key, match.term)
    return list(unique.values())


class TermMatcherAgent:
    """
    텍스트에서 용어 사전의 용어를 탐지하는 Agent

    책임: 텍스트 + 용어 사전 -> 매칭 (위치 포함) + 고유 용어 요약

    예시:
        >>> agent = TermMatcherAgent()
        >>> dictionary = (
        ...     Term(en="state", ja="国家"),
        ...     Term(en="nation state", ja="国民国家"),
        ... )
        >>> matches = agent.process("The nation state is central.", dictionary)
        >>> [m.original_text for m in matches]
        ['nation state']

    Note:
        Pure string matching, no external services. Holds no state, so a
        single instance can be shared.
    """

    def process(self, text: str, dictionary: Sequence[Term]) -> List[TermMatch]:
        """
        Match the dictionary against the text.

        Args:
            text: Text to analyse
            dictionary: Term snapshot

        Returns:
            Non-overlapping matches sorted by position
        """
        matches = match_terms(text, dictionary)
        logger.info(f"Term detection completed: {len(matches)} matches found")
        return matches

    def summarize(self, matches: Iterable[TermMatch]) -> List[Term]:
        """Unique terms in first-seen order."""
        return summarize_terms(matches)
