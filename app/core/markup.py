"""
Markup builder for highlighted text.

Turns (text, matches) into an HTML fragment for the output pane. Every
literal text segment and every attribute value drawn from a term is
escaped, so dictionary content cannot inject markup.
"""
import html
from typing import Iterable, List, Sequence

from agent.term_detection.models import Term, TermMatch
from app.core.categories import get_category_label


def escape_text(value: str) -> str:
    """Escape text content and attribute values (&, <, >, ", ')."""
    return html.escape(value or "", quote=True)


def render_term_span(match: TermMatch) -> str:
    term = match.term
    attributes = [
        ("class", "term-highlight"),
        ("data-category", term.category),
        ("data-en", term.en),
        ("data-ja", term.ja),
        ("data-note", term.note),
        ("data-reference", term.reference),
        ("data-cat-label", get_category_label(term.category)),
    ]
    attrs = " ".join(f'{name}="{escape_text(value)}"' for name, value in attributes)
    return f"<span {attrs}>{escape_text(match.original_text)}</span>"


def render_highlighted_html(text: str, matches: Sequence[TermMatch]) -> str:
    """
    Build the highlighted HTML fragment.

    Args:
        text: Source text the matches were computed on
        matches: Non-overlapping matches sorted by start

    Returns:
        Escaped HTML with one span per match and <br> for newlines
    """
    parts: List[str] = []
    last_end = 0

    for match in matches:
        if match.start > last_end:
            parts.append(escape_text(text[last_end:match.start]))
        parts.append(render_term_span(match))
        last_end = match.end

    if last_end < len(text):
        parts.append(escape_text(text[last_end:]))

    return "".join(parts).replace("\n", "<br>")


def render_term_cards_html(terms: Iterable[Term]) -> str:
    """Compact card list for the detected-terms summary."""
    cards = []
    for term in terms:
        reference = ""
        if term.reference:
            reference = f'<span class="term-card-ref" title="{escape_text(term.reference)}">📚</span>'
        cards.append(
            f'<div class="term-card" data-category="{escape_text(term.category)}">'
            f'<span class="term-card-en">{escape_text(term.en)}</span>'
            f'<span class="term-card-arrow">→</span>'
            f'<span class="term-card-ja">{escape_text(term.ja)}</span>'
            f'{reference}'
            f'</div>'
        )
    return "".join(cards)
