"""
Tests for grouping and group statistics.
"""

import pytest

from boxoffice.aggregation import (
	compute_group_stats,
	filter_genre_groups,
	group_by,
	group_by_decade,
	group_by_genre,
	group_by_year,
	groups_through_year,
	parse_decade_label,
	resolve_genre,
)
from boxoffice.models import GroupKey
from boxoffice.pipeline import DataPipeline
from tests.factories import make_movie


def test_group_stats_positive_filters():
	movies = [
		make_movie(budget=0, gross=100, score=0, runtime=0),
		make_movie(budget=100, gross=0, score=8, runtime=120),
		make_movie(budget=300, gross=500, score=6, runtime=0),
	]
	stats = compute_group_stats(movies)

	# Zero budgets/grosses excluded from budget/gross figures
	assert stats.avg_budget == 200
	assert stats.median_budget == 200
	assert stats.total_budget == 400
	assert stats.avg_gross == 300
	assert stats.median_gross == 300
	assert stats.total_gross == 600
	# Profit uses every movie: 100, -100, 200
	assert stats.total_profit == 200
	assert stats.avg_profit == pytest.approx(200 / 3)
	# Only rated / timed movies
	assert stats.avg_rating == 7
	assert stats.avg_runtime == 120


def test_group_stats_median_odd_and_even():
	odd = compute_group_stats([make_movie(budget=b) for b in (5, 1, 3)])
	assert odd.median_budget == 3
	even = compute_group_stats([make_movie(budget=b) for b in (4, 1, 3, 10)])
	assert even.median_budget == 3.5


def test_group_stats_empty_subsets_are_zero():
	stats = compute_group_stats([make_movie(budget=0, gross=0, score=0, runtime=0)])
	assert stats.avg_budget == 0 and stats.median_budget == 0 and stats.total_budget == 0
	assert stats.avg_gross == 0 and stats.median_gross == 0 and stats.total_gross == 0
	assert stats.avg_rating == 0 and stats.avg_runtime == 0

	empty = compute_group_stats([])
	assert empty.avg_profit == 0 and empty.total_profit == 0


def test_group_avg_budget_uses_positive_budgets_only():
	movies = [make_movie(budget=0), make_movie(budget=100)]
	(group,) = group_by(movies, GroupKey.YEAR)
	assert group.count == 2
	assert group.avg_budget == 100


def test_by_year_sorted_ascending():
	movies = [make_movie(year=y) for y in (2005, 1999, 2005, 1985)]
	groups = group_by_year(movies)
	assert [g.key for g in groups] == [1985, 1999, 2005]
	assert [g.count for g in groups] == [1, 1, 2]


def test_by_decade_sorted_ascending():
	movies = [make_movie(year=y) for y in (2011, 1989, 1995, 1981, 2003)]
	groups = group_by_decade(movies)
	assert [g.key for g in groups] == [1980, 1990, 2000, 2010]
	assert groups[0].count == 2


def test_year_and_decade_groups_need_filtered_records():
	movies = [make_movie(year=1995), make_movie(year="n/a"), make_movie(year=2003)]
	assert movies[1].year is None and movies[1].decade is None
	with pytest.raises(TypeError):
		group_by_year(movies)
	with pytest.raises(TypeError):
		group_by_decade(movies)

	filtered = DataPipeline().filter_records(movies)
	assert [g.key for g in group_by_year(filtered)] == [1995, 2003]
	assert [g.key for g in group_by_decade(filtered)] == [1990, 2000]


def test_genre_minimum_group_size():
	movies = [make_movie(genre='Horror') for _ in range(4)] + [make_movie(genre='Comedy') for _ in range(5)]
	groups = group_by_genre(movies)
	assert [g.key for g in groups] == ['Comedy']
	assert groups[0].count == 5

	movies.append(make_movie(genre='Horror'))
	assert {g.key for g in group_by_genre(movies)} == {'Comedy', 'Horror'}


def test_by_genre_sorted_by_avg_gross_descending():
	movies = (
		[make_movie(genre='Drama', gross=10) for _ in range(5)]
		+ [make_movie(genre='Action', gross=300) for _ in range(5)]
		+ [make_movie(genre='Comedy', gross=50) for _ in range(5)]
	)
	groups = group_by_genre(movies)
	assert [g.key for g in groups] == ['Action', 'Comedy', 'Drama']
	averages = [g.avg_gross for g in groups]
	assert averages == sorted(averages, reverse=True)


def test_group_members_keep_input_order():
	movies = [make_movie(name=f'M{i}', year=2000) for i in range(4)]
	(group,) = group_by_year(movies)
	assert [m.name for m in group.movies] == ['M0', 'M1', 'M2', 'M3']
	assert group.movies[0] is movies[0]


def test_groups_through_year():
	groups = group_by_year([make_movie(year=y) for y in (1990, 1991, 1995)])
	assert [g.key for g in groups_through_year(groups, 1991)] == [1990, 1991]


def test_parse_decade_label():
	assert parse_decade_label('1990s') == 1990
	assert parse_decade_label('2010') == 2010
	assert parse_decade_label('all') is None
	assert parse_decade_label(None) is None
	with pytest.raises(ValueError):
		parse_decade_label('1995s')
	with pytest.raises(ValueError):
		parse_decade_label('nineties')


def test_filter_genre_groups_by_decade_recomputes_stats():
	movies = (
		[make_movie(genre='Drama', year=1985, gross=100) for _ in range(5)]
		+ [make_movie(genre='Drama', year=1995, gross=900) for _ in range(5)]
		+ [make_movie(genre='Action', year=1995, gross=50) for _ in range(5)]
	)
	by_genre = group_by_genre(movies)

	eighties = filter_genre_groups(by_genre, decade=1980)
	assert [g.key for g in eighties] == ['Drama']
	assert eighties[0].count == 5
	assert eighties[0].avg_gross == 100

	nineties = filter_genre_groups(by_genre, decade=1990, min_count=5)
	assert [g.key for g in nineties] == ['Drama', 'Action']

	assert filter_genre_groups(by_genre, decade=1990, min_count=6) == ()
	assert [g.key for g in filter_genre_groups(by_genre, genre='Action')] == ['Action']


def test_resolve_genre():
	known = ['Action', 'Comedy', 'Drama']
	assert resolve_genre('drama', known) == 'Drama'
	assert resolve_genre('Comedyy', known) == 'Comedy'
	assert resolve_genre('xyz', known) is None
