"""
Bulk import / export formats for the custom dictionary.

Import: one record per line, tab-delimited when the line contains a tab,
comma-delimited otherwise. Fields: en, ja, category?, note?, reference?
Export: "en, ja, category, note, reference" per line.
"""
import logging
from typing import Dict, Iterable, List

from agent.term_detection.models import Term
from app.core.categories import DEFAULT_CATEGORY

logger = logging.getLogger(__name__)

EXPORT_SEPARATOR = ", "
EXPORT_FILENAME = "ir_custom_dictionary.csv"


def parse_bulk_line(line: str) -> Dict[str, str] | None:
    """
    Parse one import line.

    Returns:
        Term fields, or None when the line has fewer than two fields
    """
    parts = line.split("\t") if "\t" in line else line.split(",")
    if len(parts) < 2:
        return None

    def field(index: int, default: str = "") -> str:
        return parts[index].strip() if index < len(parts) else default

    return {
        "en": field(0),
        "ja": field(1),
        "category": field(2) or DEFAULT_CATEGORY,
        "note": field(3),
        "reference": field(4),
    }


def parse_bulk_text(raw: str) -> List[Dict[str, str]]:
    """
    Parse a bulk import block into term records.

    Blank and malformed lines are skipped. Records with empty en/ja are
    returned as-is; TermService counts them as skipped.
    """
    records: List[Dict[str, str]] = []
    malformed = 0

    for line in (raw or "").splitlines():
        if not line.strip():
            continue
        record = parse_bulk_line(line)
        if record is None:
            malformed += 1
            continue
        records.append(record)

    if malformed:
        logger.debug(f"Bulk import: {malformed} malformed lines skipped")
    return records


def export_terms_csv(terms: Iterable[Term]) -> str:
    """One "en, ja, category, note, reference" line per term."""
    return "\n".join(
        EXPORT_SEPARATOR.join([t.en, t.ja, t.category, t.note or "", t.reference or ""])
        for t in terms
    )
