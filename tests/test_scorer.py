"""
測試相關度評分與排序
"""

import pytest

from pinyinmatch.core.levels import StrictnessLevel
from pinyinmatch.matching.scorer import (
    ScoreBreakdown,
    ScoredCandidate,
    rank,
    rank_candidates,
    score,
    score_breakdown,
)

LOW = StrictnessLevel.LOW
MEDIUM = StrictnessLevel.MEDIUM
HIGH = StrictnessLevel.HIGH


class TestScore:
    def test_romanized_prefix_match(self):
        # 85 (MEDIUM) + 20 (拼音前綴) + 8 (長度)
        assert score("马克思主义", "makesizhuyi", "make", MEDIUM) == 113

    def test_original_text_contains(self):
        # 100 (原文包含) + 8 (長度)
        assert score("马克思主义理论", "makesizhuyililun", "主义理论", MEDIUM) == 108

    def test_original_text_prefix(self):
        # 100 + 15 (原文前綴) + 8
        assert score("马克思主义理论", "makesizhuyililun", "马克思主", MEDIUM) == 123

    def test_only_current_level_bonus_applies(self):
        assert score("马克思主义", "makesizhuyi", "makesi", HIGH) == 95 + 20 + 12
        assert score("马克思主义", "makesizhuyi", "makesi", MEDIUM) == 85 + 20 + 12
        assert score("马克思主义", "makesizhuyi", "mk", LOW) == 75 + 4

    def test_no_match_still_gets_length_bonus(self):
        assert score("马克思主义", "makesizhuyi", "xyzw", MEDIUM) == 8

    def test_case_insensitive(self):
        assert score("马克思主义", "MakeSiZhuYi", "MAKE", MEDIUM) == 113

    def test_length_monotonic(self):
        """布林條件不變時，查詢長度 +1 分數 +2"""
        shorter = score("马克思主义", "makesizhuyi", "make", MEDIUM)
        longer = score("马克思主义", "makesizhuyi", "makes", MEDIUM)
        assert longer - shorter == 2

    @pytest.mark.parametrize("level", list(StrictnessLevel))
    def test_empty_inputs_do_not_raise(self, level):
        assert isinstance(score("", "", "", level), int)
        assert isinstance(score("马克思", "makesi", "", level), int)


class TestScoreBreakdown:
    def test_breakdown_total(self):
        breakdown = score_breakdown("马克思主义", "makesizhuyi", "make", MEDIUM)

        assert breakdown == ScoreBreakdown(
            text_contains=0,
            strategy=85,
            romanized_prefix=20,
            text_prefix=0,
            query_length=8,
        )
        assert breakdown.total == 113


class TestRank:
    def setup_method(self):
        self.items = [
            ("a", "其他理论", "qitalilun"),
            ("b", "马克思主义", "makesizhuyi"),
            ("c", "其他理论", "qitalilun"),
            ("d", "马克思主义理论", "makesizhuyililun"),
        ]

    def test_descending_and_stable(self):
        ranked = rank(
            self.items,
            "make",
            MEDIUM,
            text_of=lambda item: item[1],
            romanized_of=lambda item: item[2],
        )
        ids = [item[0] for item, _ in ranked]
        scores = [s for _, s in ranked]

        assert ids == ["b", "d", "a", "c"]
        assert scores == sorted(scores, reverse=True)

    def test_all_equal_scores_keep_input_order(self):
        ranked = rank(
            self.items,
            "zzzz",
            MEDIUM,
            text_of=lambda item: item[1],
            romanized_of=lambda item: item[2],
        )
        assert [item[0] for item, _ in ranked] == ["a", "b", "c", "d"]

    def test_rank_candidates_is_stable(self):
        candidates = [
            ScoredCandidate("x", 10),
            ScoredCandidate("y", 30),
            ScoredCandidate("z", 10),
            ScoredCandidate("w", 30),
        ]
        ordered = [c.item_id for c in rank_candidates(candidates)]
        assert ordered == ["y", "w", "x", "z"]
