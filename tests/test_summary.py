"""
Tests for dataset summary statistics and success insights.
"""

import pytest

from boxoffice.aggregation import compute_group_stats
from boxoffice.summary import build_insights, summarize
from tests.factories import make_movie


def test_summary_counts_and_ranges():
	movies = [
		make_movie(year=1999, genre='Drama', budget=100, gross=300, score=8),
		make_movie(year=1985, genre='Action', budget=200, gross=100, score=0),
		make_movie(year=2010, genre='Drama', budget=300, gross=600, score=6),
	]
	summary = summarize(movies)
	assert summary.total_movies == 3
	assert summary.year_range == (1985, 2010)
	assert summary.total_budget == 600
	assert summary.total_gross == 1000
	assert summary.avg_budget == 200
	assert summary.avg_gross == pytest.approx(1000 / 3)
	assert summary.avg_rating == 7  # unrated movie ignored
	assert summary.genre_count == 2
	assert summary.profitable_movies == 2


def test_summary_average_includes_zero_budgets_unlike_groups():
	movies = [make_movie(budget=0), make_movie(budget=100)]
	assert summarize(movies).avg_budget == 50
	assert compute_group_stats(movies).avg_budget == 100


def test_summary_of_empty_dataset():
	summary = summarize([])
	assert summary.total_movies == 0
	assert summary.year_range == (0, 0)
	assert summary.avg_budget == 0 and summary.avg_gross == 0 and summary.avg_rating == 0
	assert summary.genre_count == 0 and summary.profitable_movies == 0


def test_build_insights():
	movies = [
		make_movie(name='A', budget=2_000_000, gross=20_000_000, runtime=100),  # profit 18M, ROI 10
		make_movie(name='B', budget=50_000_000, gross=52_000_000, runtime=150),  # profit 2M, break-even
		make_movie(name='C', budget=10_000_000, gross=40_000_000, runtime=95),  # profit 30M, ROI 4
		make_movie(name='D', budget=500_000, gross=5_000_000, runtime=120),  # profit 4.5M, micro budget
		make_movie(name='E', budget=20_000_000, gross=10_000_000, runtime=80),  # loss 10M
	]
	found = build_insights(movies)
	assert [m.name for m in found.top_profit] == ['C', 'A', 'D']
	assert found.top_profit_total == 52_500_000
	assert [m.name for m in found.top_roi] == ['A', 'C', 'B']
	assert found.break_even_movies == 1
	assert found.sweet_spot_avg_profit == pytest.approx((18_000_000 + 30_000_000 + 4_500_000) / 3)
	assert found.overall_avg_profit == pytest.approx(44_500_000 / 5)
	assert found.profitable_percent == 80


def test_build_insights_empty():
	found = build_insights([])
	assert found.top_profit == () and found.top_roi == ()
	assert found.top_profit_total == 0
	assert found.break_even_movies == 0
	assert found.sweet_spot_avg_profit == 0 and found.overall_avg_profit == 0
	assert found.profitable_percent == 0
