"""
Aggregation module.
Groups validated movies by year, genre or decade and computes group-level statistics.
"""

import re
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np
from rapidfuzz import fuzz, process

from .models import GroupKey, GroupKeyValue, GroupStats, GroupSummary, MovieRecord

from loguru import logger


# Minimum sample size for a genre to be reported
DEFAULT_MIN_GENRE_COUNT = 5

# "1990s" / "1990" -> 1990
_DECADE_LABEL = re.compile(r'^\s*(\d{4})s?\s*$')


def _mean(values: Sequence[float]) -> float:
	return float(np.mean(values)) if len(values) else 0.0


def _median(values: Sequence[float]) -> float:
	return float(np.median(values)) if len(values) else 0.0


def _total(values: Sequence[float]) -> float:
	return float(np.sum(values)) if len(values) else 0.0


def compute_group_stats(movies: Sequence[MovieRecord]) -> GroupStats:
	"""
	Compute statistics for one group of movies.

	Budget and gross figures ignore zero values (missing data is stored as 0),
	while profit figures use every movie so the ledger stays complete.
	Rating and runtime averages ignore unrated/unknown-length movies.
	Any statistic over an empty subset is 0.
	"""
	budgets = [m.budget for m in movies if m.budget > 0]
	grosses = [m.gross for m in movies if m.gross > 0]
	profits = [m.profit for m in movies]
	ratings = [m.rating for m in movies if m.rating > 0]
	runtimes = [m.runtime for m in movies if m.runtime > 0]

	return GroupStats(
		avg_budget=_mean(budgets),
		median_budget=_median(budgets),
		avg_gross=_mean(grosses),
		median_gross=_median(grosses),
		avg_profit=_mean(profits),
		avg_rating=_mean(ratings),
		avg_runtime=_mean(runtimes),
		total_budget=_total(budgets),
		total_gross=_total(grosses),
		total_profit=_total(profits),
	)


def _bucket(records: Iterable[MovieRecord], key: GroupKey) -> Dict[GroupKeyValue, List[MovieRecord]]:
	"""Bucket records by key, keeping first-seen key order and input order within buckets."""
	buckets: Dict[GroupKeyValue, List[MovieRecord]] = {}
	extract = key.extract
	for movie in records:
		buckets.setdefault(extract(movie), []).append(movie)
	return buckets


def _sort_groups(groups: List[GroupSummary], key: GroupKey) -> List[GroupSummary]:
	# Genres are ranked by box office; years and decades follow the calendar
	if key is GroupKey.GENRE:
		return sorted(groups, key=lambda g: g.avg_gross, reverse=True)
	return sorted(groups, key=lambda g: g.key)


def group_by(records: Iterable[MovieRecord], key: GroupKey, min_count: int = 0) -> Tuple[GroupSummary, ...]:
	"""
	Group records by the selected key and summarize each group.
	Groups with fewer than min_count members are dropped.
	"""
	buckets = _bucket(records, key)
	groups = [
		GroupSummary.from_stats(value, tuple(movies), compute_group_stats(movies))
		for value, movies in buckets.items()
		if len(movies) >= min_count
	]
	dropped = len(buckets) - len(groups)
	logger.debug(f"[Aggregator] {key.value}: {len(groups)} groups ({dropped} below minimum of {min_count})")
	return tuple(_sort_groups(groups, key))


def group_by_year(records: Iterable[MovieRecord]) -> Tuple[GroupSummary, ...]:
	"""
	One group per release year, ascending.
	Takes filtered records only: an unparsed (None) year cannot be ordered and raises TypeError.
	"""
	return group_by(records, GroupKey.YEAR)


def group_by_genre(records: Iterable[MovieRecord], min_count: int = DEFAULT_MIN_GENRE_COUNT) -> Tuple[GroupSummary, ...]:
	"""One group per primary genre with at least min_count movies, highest average gross first."""
	return group_by(records, GroupKey.GENRE, min_count=min_count)


def group_by_decade(records: Iterable[MovieRecord]) -> Tuple[GroupSummary, ...]:
	"""
	One group per decade, ascending.
	Takes filtered records only, as with group_by_year.
	"""
	return group_by(records, GroupKey.DECADE)


def groups_through_year(by_year: Iterable[GroupSummary], year: int) -> Tuple[GroupSummary, ...]:
	"""Year groups up to and including the given year (for progressive timelines)."""
	return tuple(g for g in by_year if g.key <= year)


def parse_decade_label(label: Optional[str]) -> Optional[int]:
	"""
	Turn a decade label into its first year.
	"1990s" -> 1990, "1990" -> 1990, None/""/"all" -> None (no restriction).
	"""
	if label is None or not label.strip() or label.strip().lower() == 'all':
		return None
	match = _DECADE_LABEL.match(label)
	if not match or int(match.group(1)) % 10:
		raise ValueError(f"Invalid decade label: {label!r}")
	return int(match.group(1))


def filter_genre_groups(
	by_genre: Iterable[GroupSummary],
	decade: Optional[int] = None,
	min_count: int = DEFAULT_MIN_GENRE_COUNT,
	genre: Optional[str] = None,
) -> Tuple[GroupSummary, ...]:
	"""
	Narrow the genre groups for an interactive view.

	- decade: keep only each genre's movies from that decade and recompute its statistics
	  (genres with no movies left are removed)
	- min_count: drop genres with fewer movies than this
	- genre: keep a single genre by exact name

	Input order is preserved, so the result stays ranked by the original average gross.
	"""
	groups: List[GroupSummary] = []
	for group in by_genre:
		if decade is not None:
			movies = tuple(m for m in group.movies if m.decade == decade)
			if not movies:
				continue
			group = GroupSummary.from_stats(group.key, movies, compute_group_stats(movies))
		if group.count < min_count:
			continue
		if genre is not None and group.key != genre:
			continue
		groups.append(group)
	return tuple(groups)


def resolve_genre(name: str, known_genres: Iterable[str], score_cutoff: float = 80.0) -> Optional[str]:
	"""
	Map a user-typed genre to a known genre name.
	Exact (case-insensitive) matches win; otherwise the closest fuzzy match above score_cutoff, else None.
	"""
	choices = list(known_genres)
	wanted = name.strip().lower()
	for genre in choices:
		if genre.lower() == wanted:
			return genre
	match = process.extractOne(wanted, choices, scorer=fuzz.WRatio, processor=str.lower, score_cutoff=score_cutoff)
	return match[0] if match else None
