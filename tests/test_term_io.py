"""
Bulk import / export format 테스트
"""

import pytest

from agent.term_detection import Term
from app.core.term_io import export_terms_csv, parse_bulk_line, parse_bulk_text


class TestParseBulk:

    def test_comma_line(self):
        record = parse_bulk_line("deterrence, 抑止, security, note, Schelling (1966)")

        assert record == {
            "en": "deterrence",
            "ja": "抑止",
            "category": "security",
            "note": "note",
            "reference": "Schelling (1966)",
        }

    def test_tab_line_keeps_commas(self):
        record = parse_bulk_line("two-level game\t2レベル・ゲーム\tdiplomacy\tPutnam, 1988")

        assert record["en"] == "two-level game"
        assert record["ja"] == "2レベル・ゲーム"
        assert record["category"] == "diplomacy"
        assert record["note"] == "Putnam, 1988"
        assert record["reference"] == ""

    def test_category_defaults_to_custom(self):
        assert parse_bulk_line("détente, 緊張緩和")["category"] == "custom"
        assert parse_bulk_line("détente, 緊張緩和, ")["category"] == "custom"

    @pytest.mark.parametrize("line", ["only english", "", "   "])
    def test_single_field_is_skipped(self, line):
        assert parse_bulk_line(line) is None

    def test_parse_text_skips_blank_and_malformed(self):
        raw = "\n".join([
            "containment, 封じ込め, diplomacy",
            "",
            "no translation here",
            "   ",
            "appeasement\t宥和政策",
        ])

        records = parse_bulk_text(raw)

        assert [r["en"] for r in records] == ["containment", "appeasement"]

    def test_empty_fields_are_returned(self):
        records = parse_bulk_text(", 訳のみ")

        assert records == [{"en": "", "ja": "訳のみ", "category": "custom", "note": "", "reference": ""}]

    def test_none(self):
        assert parse_bulk_text(None) == []


class TestExport:

    def test_export_lines(self):
        terms = [
            Term(en="balance of power", ja="勢力均衡", category="theory", note="n", reference="Waltz"),
            Term(en="gray zone", ja="グレーゾーン"),
        ]

        content = export_terms_csv(terms)

        assert content.split("\n") == [
            "balance of power, 勢力均衡, theory, n, Waltz",
            "gray zone, グレーゾーン, custom, , ",
        ]

    def test_export_then_import(self):
        term = Term(en="soft power", ja="ソフト・パワー", category="theory", note="attraction", reference="Nye")

        records = parse_bulk_text(export_terms_csv([term]))

        assert Term.from_dict(records[0]) == term

    def test_export_empty(self):
        assert export_terms_csv([]) == ""
