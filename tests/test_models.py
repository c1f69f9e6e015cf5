"""tests/test_models.py"""
import numpy as np
import pytest
from src.models.statistical.advanced_analyzer import AdvancedAnalyzer, AdvancedStats
from src.models.statistical.frequency_analyzer import FrequencyAnalyzer
from src.models.statistical.pattern_analyzer import PatternAnalyzer, count_consecutive
from src.models.strategy_selector import StrategySelector
from src.utils.config import get_analysis_config


HISTORY_645 = [
    [3, 13, 15, 24, 33, 37],
    [8, 12, 15, 29, 40, 45],
    [1, 4, 16, 23, 31, 41],
    [7, 9, 24, 27, 35, 36],
    [2, 19, 26, 31, 38, 41],
    [10, 14, 19, 21, 26, 37],
    [6, 11, 17, 19, 40, 43],
    [5, 12, 24, 26, 39, 42],
    [3, 6, 7, 11, 12, 17],
    [14, 23, 25, 27, 29, 42],
    [12, 20, 26, 33, 44, 45],
    [1, 9, 12, 13, 20, 45],
]


def make_history(size: int, seed: int = 7) -> list[list[int]]:
    rng = np.random.default_rng(seed)
    return [sorted(int(n) for n in rng.choice(np.arange(1, 46), 6, replace=False)) for _ in range(size)]


class TestFrequencyAnalyzer:
    def setup_method(self):
        self.fa = FrequencyAnalyzer(number_range=(1, 45))

    def test_single_draw_table(self):
        table = self.fa.get_frequency_table([[1, 2, 3, 4, 5, 6]])
        assert dict(table) == {1: 1, 2: 1, 3: 1, 4: 1, 5: 1, 6: 1}
        assert table[7] == 0
        assert table[45] == 0

    @pytest.mark.parametrize("size", [0, 1, 5, 10, 100])
    def test_total_count_is_six_per_draw(self, size):
        history = make_history(size)
        assert sum(self.fa.get_frequency_table(history).values()) == 6 * size

    def test_empty_history(self):
        assert len(self.fa.get_frequency_table([])) == 0
        summary = self.fa.get_summary([])
        assert summary.has_data is False
        assert summary.most_frequent is None
        assert summary.least_frequent is None
        assert summary.average_sum is None

    def test_summary(self):
        summary = self.fa.get_summary([[1, 2, 3, 4, 5, 6], [1, 7, 8, 9, 10, 11]])
        assert summary.total_draws == 2
        assert summary.most_frequent == 1
        assert summary.least_frequent == 2  # lowest count, smallest number
        assert summary.average_sum == 34  # (21 + 46) / 2 = 33.5 rounds up

    def test_relative_frequencies(self):
        rel = self.fa.get_relative_frequencies([[1, 2, 3, 4, 5, 6], [1, 7, 8, 9, 10, 11]])
        assert len(rel) == 45
        assert rel[1] == 100.0
        assert rel[2] == 50.0
        assert rel[45] == 0.0

    def test_relative_frequencies_empty(self):
        rel = self.fa.get_relative_frequencies([])
        assert set(rel.values()) == {0.0}


class TestPatternAnalyzer:
    def setup_method(self):
        self.pa = PatternAnalyzer(range_bands=get_analysis_config()["pattern"]["range_bands"])

    def test_count_consecutive(self):
        assert count_consecutive([6, 5, 4, 3, 2, 1]) == 5
        assert count_consecutive([1, 3, 5, 7, 9, 11]) == 0
        assert count_consecutive([10, 11, 20, 21, 22, 40]) == 3

    def test_single_run(self):
        stats = self.pa.analyze([[1, 2, 3, 4, 5, 6]])
        assert stats.has_data
        assert stats.consecutive_rate == 5.0
        assert stats.odd_pct == 50.0
        assert stats.even_pct == 50.0
        assert stats.range_distribution == {"1-15": 100.0, "16-30": 0.0, "31-45": 0.0}

    def test_mixed_history(self):
        stats = self.pa.analyze([[1, 2, 3, 4, 5, 6], [10, 20, 30, 40, 41, 45]])
        assert stats.consecutive_rate == 3.0
        assert stats.odd_pct == pytest.approx(5 / 12 * 100)
        assert stats.even_pct == pytest.approx(7 / 12 * 100)
        assert stats.range_distribution["1-15"] == pytest.approx(7 / 12 * 100)
        assert stats.range_distribution["16-30"] == pytest.approx(2 / 12 * 100)
        assert stats.range_distribution["31-45"] == pytest.approx(3 / 12 * 100)

    def test_empty_history_reports_no_data(self):
        stats = self.pa.analyze([])
        assert stats.has_data is False
        assert stats.consecutive_rate is None
        assert stats.odd_pct is None
        assert stats.range_distribution is None
        assert set(stats.describe().values()) == {"no data"}

    def test_describe(self):
        text = self.pa.analyze([[1, 2, 3, 4, 5, 6]]).describe()
        assert text["consecutive"] == "avg 5.0 consecutive numbers"
        assert text["odd_even"] == "odd 50.0% : even 50.0%"
        assert text["ranges"] == "1-15: 100.0%, 16-30: 0.0%, 31-45: 0.0%"


class TestAdvancedAnalyzer:
    def setup_method(self):
        self.aa = AdvancedAnalyzer(number_range=(1, 45))

    def test_single_draw(self):
        stats = self.aa.analyze([[1, 2, 3, 4, 5, 6]])
        assert stats.hot_numbers == [1, 2, 3, 4, 5, 6]
        assert stats.cold_numbers == [1, 2, 3, 4, 5, 6]
        assert stats.overdue_numbers == list(range(7, 46))
        assert stats.sum_distribution == {20: 1}

    def test_empty_history(self):
        stats = self.aa.analyze([])
        assert stats.hot_numbers == []
        assert stats.cold_numbers == []
        assert stats.overdue_numbers == list(range(1, 46))
        assert stats.sum_distribution == {}

    def test_ties_break_by_ascending_number(self):
        stats = self.aa.analyze([[10, 20, 30, 40, 41, 42], [5, 6, 7, 8, 9, 10]])
        assert stats.hot_numbers == [10, 5, 6, 7, 8, 9, 20, 30, 40, 41]
        assert stats.cold_numbers == [5, 6, 7, 8, 9, 20, 30, 40, 41, 42]

    def test_hot_uses_only_recent_window(self):
        old = [[40, 41, 42, 43, 44, 45]] * 5
        recent = [[1, 2, 3, 4, 5, 6]] * 10
        stats = self.aa.analyze(recent + old)
        assert not set(stats.hot_numbers) & {40, 41, 42, 43, 44, 45}
        # but the sum histogram covers everything
        assert stats.sum_distribution == {20: 10, 240: 5}

    @pytest.mark.parametrize("size", [1, 2, 5, 10, 100])
    def test_hot_cold_overlap(self, size):
        history = make_history(size, seed=size)
        stats = self.aa.analyze(history)
        distinct = len({n for draw in history[:10] for n in draw})
        overlap = len(set(stats.hot_numbers) & set(stats.cold_numbers))
        assert overlap == max(0, 2 * min(10, distinct) - distinct)
        if distinct >= 10:
            assert overlap == max(0, 20 - distinct)

    @pytest.mark.parametrize("size", [0, 1, 3, 5, 12])
    def test_overdue_complements_recent_five(self, size):
        history = make_history(size, seed=3)
        stats = self.aa.analyze(history)
        recent = {n for draw in history[:5] for n in draw}
        assert set(stats.overdue_numbers) | recent == set(range(1, 46))
        assert not set(stats.overdue_numbers) & recent

    def test_sum_distribution_rows(self):
        stats = self.aa.analyze(HISTORY_645)
        rows = stats.sum_distribution_rows()
        assert [r[0] for r in rows] == sorted(stats.sum_distribution)
        assert all(end == start + 19 for start, end, _ in rows)
        assert sum(count for _, _, count in rows) == len(HISTORY_645)

    def test_unknown_pool(self):
        with pytest.raises(ValueError):
            AdvancedStats().pool("warm_numbers")

    def test_zero_top_n_gives_empty_rankings(self):
        stats = AdvancedAnalyzer(number_range=(1, 45), top_n=0).analyze(HISTORY_645)
        assert stats.hot_numbers == []
        assert stats.cold_numbers == []


class TestStrategySelector:
    def setup_method(self):
        self.config = get_analysis_config()
        self.selector = StrategySelector(
            strategies=self.config["strategies"],
            number_range=(1, 45),
            pick_count=6,
            rng=np.random.default_rng(42),
        )
        self.aa = AdvancedAnalyzer(number_range=(1, 45))

    @staticmethod
    def assert_valid(numbers):
        assert len(numbers) == 6
        assert len(set(numbers)) == 6
        assert all(1 <= n <= 45 for n in numbers)
        assert numbers == sorted(numbers)
        assert all(type(n) is int for n in numbers)

    @pytest.mark.parametrize("strategy", ["hot_numbers", "cold_numbers", "overdue_numbers", "balanced"])
    @pytest.mark.parametrize("size", [0, 1, 5, 10, 100])
    def test_output_is_valid(self, strategy, size):
        stats = self.aa.analyze(make_history(size))
        for _ in range(20):
            suggestion = self.selector.generate(stats, strategy=strategy)
            self.assert_valid(suggestion.numbers)
            assert suggestion.strategy == strategy

    def test_hot_strategy_draws_from_hot_pool(self):
        stats = AdvancedStats(hot_numbers=[1, 2, 3])
        numbers = self.selector.generate(stats, strategy="hot_numbers").numbers
        assert {1, 2, 3} <= set(numbers)

    def test_overdue_strategy_takes_four(self):
        stats = AdvancedStats(overdue_numbers=[40, 41, 42, 43])
        numbers = self.selector.generate(stats, strategy="overdue_numbers").numbers
        assert {40, 41, 42, 43} <= set(numbers)

    def test_balanced_mix(self):
        stats = AdvancedStats(hot_numbers=[1, 2], cold_numbers=[3, 4], overdue_numbers=[5, 6])
        suggestion = self.selector.generate(stats, strategy="balanced")
        assert suggestion.numbers == [1, 2, 3, 4, 5, 6]
        assert suggestion.label == "Balanced strategy"

    def test_select_from_short_pool(self):
        assert sorted(self.selector.select_from_pool([7, 8], 3)) == [7, 8]
        assert self.selector.select_from_pool([], 3) == []

    def test_random_choice_covers_all_strategies(self):
        stats = self.aa.analyze(HISTORY_645)
        seen = {self.selector.generate(stats).strategy for _ in range(400)}
        assert seen == set(self.config["strategies"])

    def test_seeded_output_is_reproducible(self):
        stats = self.aa.analyze(HISTORY_645)
        a = StrategySelector(self.config["strategies"], rng=np.random.default_rng(5))
        b = StrategySelector(self.config["strategies"], rng=np.random.default_rng(5))
        assert a.generate(stats) == b.generate(stats)

    def test_unknown_strategy(self):
        with pytest.raises(ValueError):
            self.selector.generate(AdvancedStats(), strategy="lucky")

    def test_empty_strategy_name_is_rejected(self):
        with pytest.raises(ValueError):
            self.selector.generate(AdvancedStats(), strategy="")

    def test_generate_random(self):
        for _ in range(50):
            suggestion = self.selector.generate_random()
            self.assert_valid(suggestion.numbers)
            assert suggestion.strategy == "random"
