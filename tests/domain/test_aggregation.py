"""Unit tests for the aggregate statistics."""

from decimal import Decimal

from pricetracker.domain.service.aggregation import aggregate
from tests.fakes import make_record


def _records(*prices: str):
    return [make_record(price=p, record_id=str(i)) for i, p in enumerate(prices, 1)]


class TestAggregateEmpty:

    def test_zero_values(self):
        stats = aggregate([])
        assert stats.count == 0
        assert stats.mean == "0.00"
        assert stats.min == "0.00"
        assert stats.max == "0.00"

    def test_accepts_any_iterable(self):
        assert aggregate(iter([])).count == 0


class TestAggregate:

    def test_count_matches_input(self):
        assert aggregate(_records("1", "2", "3", "4")).count == 4

    def test_mean_min_max(self):
        stats = aggregate(_records("5.00", "4.50", "4.80"))
        assert stats.mean == "4.77"
        assert stats.min == "4.50"
        assert stats.max == "5.00"

    def test_single_record(self):
        stats = aggregate(_records("3.5"))
        assert (stats.mean, stats.min, stats.max) == ("3.50", "3.50", "3.50")

    def test_mean_lies_between_min_and_max(self):
        samples = [
            ("0.01", "0.02"),
            ("9.99", "0.00", "3.33"),
            ("1.005", "1.004", "1.006"),
            ("100", "0.10", "7.77", "7.78"),
        ]
        for prices in samples:
            stats = aggregate(_records(*prices))
            assert Decimal(stats.min) <= Decimal(stats.mean) <= Decimal(stats.max)

    def test_is_repeatable(self):
        records = _records("2", "4")
        assert aggregate(records) == aggregate(records)

    def test_largest_prices_still_summarize(self):
        stats = aggregate(_records(*["999999999999.99"] * 50))
        assert stats.count == 50
        assert stats.mean == stats.min == stats.max == "999999999999.99"
