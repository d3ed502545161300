"""
TermMatcherAgent 테스트

Longest-match-first 용어 탐지 정확도 테스트 (위치, 경계, 겹침, 요약)
"""

import pytest

from agent.term_detection import (
    Term,
    TermMatch,
    TermMatcherAgent,
    has_word_boundaries,
    match_terms,
    rank_terms,
    summarize_terms,
)
from agent.term_detection.term_matcher_agent import fold_case
from app.core.ir_dictionary import BUILTIN_TERMS


STATE = Term(en="state", ja="国家", category="theory")
NATION_STATE = Term(en="nation state", ja="国民国家", category="theory")
POWER = Term(en="power", ja="権力", category="theory")
BALANCE_OF_POWER = Term(en="balance of power", ja="勢力均衡", category="theory")

IR_PARAGRAPH = (
    "After the Cold War, the balance of power shifted. Non-state actors and "
    "great powers compete; the security dilemma persists.\n"
    "Deterrence (nuclear deterrence) and arms control still matter to every state."
)


def assert_well_formed(text, matches):
    """Sorted, non-overlapping, boundary-respecting, original casing kept"""
    for previous, current in zip(matches, matches[1:]):
        assert previous.start < current.start
        assert previous.end <= current.start
    for m in matches:
        assert 0 <= m.start < m.end <= len(text)
        assert m.end - m.start == len(m.term.en)
        assert m.original_text == text[m.start:m.end]
        assert m.original_text.lower() == m.term.en.lower()
        assert has_word_boundaries(text, m.start, m.end)


class TestMatchTerms:
    """match_terms 테스트 클래스"""

    @pytest.fixture
    def agent(self):
        return TermMatcherAgent()

    def test_longer_term_wins(self, agent):
        """긴 용어가 짧은 용어보다 우선"""
        text = "The nation state is central."

        matches = agent.process(text, (STATE, NATION_STATE))

        assert len(matches) == 1
        assert matches[0].start == 4
        assert matches[0].end == 16
        assert matches[0].term == NATION_STATE
        assert matches[0].original_text == "nation state"

    def test_no_match_inside_word(self, agent):
        """단어 내부 매칭 금지"""
        assert agent.process("The statesman spoke.", (STATE,)) == []
        assert agent.process("Interstate rivalry and statehood", (STATE,)) == []

    def test_repeated_term(self, agent):
        """같은 용어 여러 번 출현"""
        text = "balance of power, and power."

        matches = agent.process(text, (POWER,))

        assert [(m.start, m.end) for m in matches] == [(11, 16), (22, 27)]
        assert all(m.original_text == "power" for m in matches)

    def test_phrase_and_single_word(self, agent):
        text = "balance of power, and power."

        matches = agent.process(text, (POWER, BALANCE_OF_POWER))

        assert [(m.start, m.end, m.term.en) for m in matches] == [
            (0, 16, "balance of power"),
            (22, 27, "power"),
        ]

    def test_empty_input(self, agent):
        """빈 입력은 빈 결과"""
        assert agent.process("", (STATE,)) == []
        assert agent.process("state", ()) == []
        assert agent.process("", ()) == []

    def test_case_insensitive_keeps_original_casing(self):
        text = "The Security Dilemma and the SECURITY DILEMMA."
        term = Term(en="security dilemma", ja="安全保障のジレンマ", category="security")

        matches = match_terms(text, (term,))

        assert [m.original_text for m in matches] == ["Security Dilemma", "SECURITY DILEMMA"]
        assert all(m.term is term for m in matches)

    def test_uppercase_dictionary_entry(self):
        matches = match_terms("the cold war ended", (Term(en="Cold War", ja="冷戦"),))

        assert len(matches) == 1
        assert matches[0].original_text == "cold war"

    @pytest.mark.parametrize("text", [
        '"state"',
        "(state)",
        "[state]",
        "{state}",
        "state-building",
        "non-state",
        "state/nation",
        "the state's role",
        "state; state: state! state? state, state.",
        "a\tstate\nb",
    ])
    def test_punctuation_boundaries(self, text):
        """구두점/공백 경계"""
        matches = match_terms(text, (STATE,))

        assert len(matches) >= 1
        assert_well_formed(text, matches)

    @pytest.mark.parametrize("text", ["states", "_state", "state2", "1state", "stateless"])
    def test_non_boundary_neighbours(self, text):
        assert match_terms(text, (STATE,)) == []

    def test_global_longest_first_not_leftmost(self):
        """왼쪽 매칭이 아닌 전역 최장 매칭 우선"""
        arms_race = Term(en="arms race", ja="軍拡競争")
        race_to_bottom = Term(en="race to the bottom", ja="底辺への競争")

        matches = match_terms("arms race to the bottom", (arms_race, race_to_bottom))

        assert len(matches) == 1
        assert matches[0].term == race_to_bottom
        assert (matches[0].start, matches[0].end) == (5, 23)

    def test_shorter_term_fills_unclaimed_positions(self):
        matches = match_terms("power and balance of power", (POWER, BALANCE_OF_POWER))

        assert [(m.start, m.term.en) for m in matches] == [
            (0, "power"),
            (10, "balance of power"),
        ]

    def test_equal_length_tie_break_is_deterministic(self):
        """같은 길이의 겹치는 용어: 소문자 en 사전순"""
        first = Term(en="aa bb", ja="1")
        second = Term(en="bb cc", ja="2")

        forward = match_terms("aa bb cc", (first, second))
        backward = match_terms("aa bb cc", (second, first))

        assert [m.term for m in forward] == [first]
        assert [m.term for m in backward] == [first]

    def test_overlapping_occurrence_of_same_term(self):
        """첫 출현이 경계 검사 실패 시 겹치는 다음 출현도 검사"""
        term = Term(en="a a", ja="x")

        matches = match_terms("xa a a", (term,))

        assert [(m.start, m.end) for m in matches] == [(3, 6)]

    def test_same_term_overlapping_occurrences_keep_first(self):
        matches = match_terms("ab ab ab", (Term(en="ab ab", ja="x"),))

        assert [(m.start, m.end) for m in matches] == [(0, 5)]

    def test_offsets_survive_case_folding(self):
        """소문자 변환 시 길이가 바뀌는 문자 (İ)"""
        text = "İstanbul is not a state."

        matches = match_terms(text, (STATE,))

        assert len(matches) == 1
        assert matches[0].start == 18
        assert matches[0].original_text == "state"

    def test_final_sigma_next_to_length_changing_char(self):
        """İ 가 있는 텍스트에서도 텍스트와 용어의 case fold 가 일치"""
        term = Term(en="κρατος", ja="国家")
        text = "İstanbul and ΚΡΑΤΟΣ"

        matches = match_terms(text, (term,))

        assert len(matches) == 1
        assert matches[0].start == 13
        assert matches[0].original_text == "ΚΡΑΤΟΣ"

    def test_uppercase_sigma_term_matches_final_sigma_text(self):
        matches = match_terms("the κρατος.", (Term(en="ΚΡΑΤΟΣ", ja="国家"),))

        assert [m.original_text for m in matches] == ["κρατος"]

    def test_empty_en_is_ignored(self):
        matches = match_terms("a state", (Term(en="", ja="空"), STATE))

        assert [m.term for m in matches] == [STATE]

    def test_dictionary_is_not_mutated(self):
        dictionary = [STATE, POWER, NATION_STATE]
        snapshot = list(dictionary)

        match_terms("nation state power", dictionary)

        assert dictionary == snapshot

    def test_builtin_dictionary_on_paragraph(self):
        """내장 사전 + 실제 문단"""
        matches = match_terms(IR_PARAGRAPH, BUILTIN_TERMS)

        assert_well_formed(IR_PARAGRAPH, matches)
        found = [m.original_text for m in matches]
        for expected in ("Cold War", "balance of power", "security dilemma",
                         "Deterrence", "nuclear deterrence", "arms control"):
            assert expected in found
        # "great powers" / "actors": 경계 실패
        assert "great power" not in [m.term.en for m in matches]
        assert "non-state actor" not in [m.term.en for m in matches]

    def test_match_to_dict(self):
        match = match_terms("a state", (STATE,))[0]

        data = match.to_dict()

        assert data["start"] == 2
        assert data["end"] == 7
        assert data["original_text"] == "state"
        assert data["term"]["ja"] == "国家"


class TestHelpers:
    """rank / fold / boundary helper 테스트"""

    def test_rank_terms_longest_first(self):
        ranked = rank_terms((STATE, BALANCE_OF_POWER, POWER, NATION_STATE))

        assert [t.en for t in ranked] == ["balance of power", "nation state", "power", "state"]

    def test_rank_terms_ties_by_lowercase_then_index(self):
        a1 = Term(en="Alpha", ja="1")
        a2 = Term(en="alpha", ja="2")
        b = Term(en="bravo", ja="3")

        assert rank_terms((b, a1, a2)) == [a1, a2, b]
        assert rank_terms((b, a2, a1)) == [a2, a1, b]

    def test_fold_case_preserves_length(self):
        for value in ("State", "İstanbul", "ß and ẞ", "DÉTENTE"):
            assert len(fold_case(value)) == len(value)
        assert fold_case("DÉTENTE") == "détente"
        assert fold_case("ΚΡΑΤΟΣ") == fold_case("κρατος")
        assert fold_case("İ") == "İ"

    def test_text_edges_are_boundaries(self):
        assert has_word_boundaries("state", 0, 5)
        assert not has_word_boundaries("states", 0, 5)
        assert not has_word_boundaries("xstate", 1, 6)


class TestSummarize:
    """고유 용어 요약 테스트"""

    def test_unique_terms_in_first_seen_order(self):
        text = "power, the nation state, and power again; state."
        matches = match_terms(text, (POWER, NATION_STATE, STATE))

        terms = summarize_terms(matches)

        assert [t.en for t in terms] == ["power", "nation state", "state"]

    def test_dedup_is_case_insensitive(self):
        upper = Term(en="Power", ja="パワー")
        lower = Term(en="power", ja="権力")
        matches = [
            TermMatch(start=0, end=5, term=upper, original_text="Power"),
            TermMatch(start=10, end=15, term=lower, original_text="power"),
        ]

        terms = TermMatcherAgent().summarize(matches)

        assert terms == [upper]

    def test_empty(self):
        assert summarize_terms([]) == []
