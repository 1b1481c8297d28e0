"""
Tests for the shared aggregation helpers.
"""

from oss_api.engines.metrics import count_by, group_by, mean, percentage, rank, round_half_up, sum_by, top_n


class TestRounding:
    """Half-up rounding, unlike Python's built-in round()."""

    def test_half_rounds_up(self):
        """.5 goes up."""
        assert round_half_up(62.5) == 63
        assert round_half_up(2.5) == 3

    def test_below_half_rounds_down(self):
        assert round_half_up(27.93) == 28
        assert round_half_up(86.4) == 86

    def test_negative_half(self):
        """-2.5 rounds toward positive infinity."""
        assert round_half_up(-2.5) == -2


class TestPercentage:
    """Rounded whole-number percentages."""

    def test_twelve_of_twenty(self):
        """12 / 20 = 60%."""
        assert percentage(12, 20) == 60

    def test_empty_total_is_zero(self):
        """Nothing to divide by -- 0%, not ZeroDivisionError."""
        assert percentage(0, 0) == 0
        assert percentage(5, 0) == 0

    def test_rounds_half_up(self):
        # 13 / 15 = 86.67%
        assert percentage(13, 15) == 87
        # 1 / 8 = 12.5%
        assert percentage(1, 8) == 13


class TestMean:
    """Arithmetic mean with an empty-input default."""

    def test_empty_is_zero(self):
        """Mean of nothing is 0.0."""
        assert mean([]) == 0.0

    def test_accepts_generators(self):
        assert mean(x for x in [1, 2, 3, 4]) == 2.5


class TestRanking:
    """Stable numeric ranking."""

    def test_descending_by_default(self):
        assert rank([3, 1, 2], key=lambda x: x) == [3, 2, 1]

    def test_ascending(self):
        assert rank([3, 1, 2], key=lambda x: x, descending=False) == [1, 2, 3]

    def test_ties_keep_input_order(self):
        """Equal keys stay in the order they came in."""
        items = [("a", 1), ("b", 2), ("c", 1), ("d", 2)]
        ranked = rank(items, key=lambda pair: pair[1])
        assert [name for name, _ in ranked] == ["b", "d", "a", "c"]

    def test_limit(self):
        """limit keeps only the top entries."""
        assert rank(range(10), key=lambda x: x, limit=3) == [9, 8, 7]

    def test_top_n_none_returns_everything(self):
        assert top_n([1, 2, 3], None) == [1, 2, 3]

    def test_top_n_negative_is_empty(self):
        """A negative limit returns nothing."""
        assert top_n([1, 2, 3], -1) == []


class TestGrouping:
    """Counting, grouping and summing by key."""

    def test_count_by_sums_to_input_size(self):
        """Counts per key add back up to the input size."""
        words = ["apple", "avocado", "banana", "cherry", "blueberry"]
        counts = count_by(words, key=lambda w: w[0])
        assert counts == {"a": 2, "b": 2, "c": 1}
        assert sum(counts.values()) == len(words)

    def test_group_by_keeps_first_seen_order(self):
        """Groups appear in the order their key was first seen."""
        groups = group_by([5, 2, 8, 3], key=lambda n: n % 2)
        assert list(groups) == [1, 0]
        assert groups[0] == [2, 8]

    def test_sum_by(self):
        rows = [("x", 1.5), ("y", 2.0), ("x", 0.5)]
        assert sum_by(rows, key=lambda r: r[0], value=lambda r: r[1]) == {"x": 2.0, "y": 2.0}
