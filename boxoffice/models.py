"""
Data models for the Box Office analytics pipeline.
Defines the core data structures produced by each stage of the pipeline.
"""

# Import dataclass to define simple "record-like" classes without boilerplate
from dataclasses import dataclass  # auto-generates __init__, __repr__, __eq__
# Enum for the fixed set of grouping selectors
from enum import Enum  # enum-like key selector
# Import typing helpers for precise and self-documenting types
from typing import Any, Callable, Dict, Optional, Tuple, Union  # type hints


# A raw input row exactly as read from the source file (string-keyed, untyped values)
RawRecord = Dict[str, Any]

# Group keys are years/decades (int) or genre names (str)
GroupKeyValue = Union[int, str]


@dataclass(frozen=True)
class MovieRecord:
	"""
	One normalized movie.
	Created once per raw row by the DataLoader and never mutated afterwards.
	"""
	name: str  # title, "Unknown" when missing
	year: Optional[int]  # release year; None when the raw value could not be parsed
	decade: Optional[int]  # (year // 10) * 10, None when year is None
	genre: str  # primary genre (first comma-separated token)
	rating: float  # user score, 0 when unparsable
	votes: int  # number of votes, 0 when unparsable
	budget: float  # production budget, 0 when unparsable/empty
	gross: float  # box office gross, 0 when unparsable/empty
	profit: float  # gross - budget (may be negative)
	profit_margin: float  # profit / budget * 100, 0 when budget is 0
	roi: float  # gross / budget, 0 when budget is 0
	runtime: float  # minutes, 0 when unparsable
	director: str  # director name, "Unknown" when missing
	star: str  # lead actor, "Unknown" when missing
	company: str  # production company, "Unknown" when missing
	country: str  # country of origin, "Unknown" when missing
	is_valid: bool  # budget > 0 and gross > 0 and year parsed and year > 1900


@dataclass(frozen=True)
class FinancialMetrics:
	"""Profit figures derived from a budget/gross pair."""
	profit: float
	profit_margin: float
	roi: float


@dataclass(frozen=True)
class GroupStats:
	"""
	Fixed-shape statistics for one group of movies.
	Budget/gross figures only consider positive values; profit figures consider every movie.
	"""
	avg_budget: float
	median_budget: float
	avg_gross: float
	median_gross: float
	avg_profit: float
	avg_rating: float
	avg_runtime: float
	total_budget: float
	total_gross: float
	total_profit: float


@dataclass(frozen=True)
class GroupSummary:
	"""Aggregated view of all movies sharing one key (a year, a genre or a decade)."""
	key: GroupKeyValue  # year, genre name or decade
	count: int  # number of movies in the group (including zero-budget ones)
	avg_budget: float
	median_budget: float
	avg_gross: float
	median_gross: float
	avg_profit: float
	avg_rating: float
	avg_runtime: float
	total_budget: float
	total_gross: float
	total_profit: float
	movies: Tuple[MovieRecord, ...]  # members in input order

	@classmethod
	def from_stats(cls, key: GroupKeyValue, movies: Tuple[MovieRecord, ...], stats: GroupStats) -> 'GroupSummary':
		"""Build a summary field by field from a complete GroupStats record."""
		return cls(
			key=key,
			count=len(movies),
			avg_budget=stats.avg_budget,
			median_budget=stats.median_budget,
			avg_gross=stats.avg_gross,
			median_gross=stats.median_gross,
			avg_profit=stats.avg_profit,
			avg_rating=stats.avg_rating,
			avg_runtime=stats.avg_runtime,
			total_budget=stats.total_budget,
			total_gross=stats.total_gross,
			total_profit=stats.total_profit,
			movies=movies,
		)


class GroupKey(Enum):
	"""
	Selector for the three supported groupings.
	Each member knows how to extract its key from a MovieRecord.
	"""
	YEAR = 'year'
	GENRE = 'genre'
	DECADE = 'decade'

	@property
	def extract(self) -> Callable[[MovieRecord], Any]:
		"""Return the key-extraction function for this grouping."""
		return _KEY_EXTRACTORS[self]


_KEY_EXTRACTORS: Dict[GroupKey, Callable[[MovieRecord], Any]] = {
	GroupKey.YEAR: lambda movie: movie.year,
	GroupKey.GENRE: lambda movie: movie.genre,
	GroupKey.DECADE: lambda movie: movie.decade,
}


@dataclass(frozen=True)
class TopMovieSets:
	"""Four independent leaderboards; entries reference records from the filtered dataset."""
	by_gross: Tuple[MovieRecord, ...]
	by_profit: Tuple[MovieRecord, ...]
	by_roi: Tuple[MovieRecord, ...]
	by_rating: Tuple[MovieRecord, ...]


@dataclass(frozen=True)
class DatasetSummary:
	"""Dataset-wide scalar statistics over the filtered records."""
	total_movies: int
	year_range: Tuple[int, int]  # (min year, max year); (0, 0) when empty
	total_budget: float
	total_gross: float
	avg_budget: float  # over every record, zero budgets included
	avg_gross: float  # over every record, zero grosses included
	avg_rating: float  # over rated records only
	genre_count: int
	profitable_movies: int


@dataclass(frozen=True)
class SuccessInsights:
	"""
	Headline figures about what made movies in a subset successful.
	Usually computed over the profit-threshold selection of the filtered dataset.
	"""
	top_profit: Tuple[MovieRecord, ...]  # three most profitable movies
	top_profit_total: float  # combined profit of top_profit
	top_roi: Tuple[MovieRecord, ...]  # three best ROI movies with a budget over $1M
	break_even_movies: int  # movies whose gross is within 10% of their budget
	sweet_spot_avg_profit: float  # average profit of 90-120 minute movies
	overall_avg_profit: float  # average profit of the whole subset
	profitable_percent: float  # share of movies with profit > 0, in percent


@dataclass(frozen=True)
class ProcessedDataset:
	"""Root structure handed to consumers; produced exactly once per pipeline run."""
	raw: Tuple[MovieRecord, ...]  # filtered records in input order
	by_year: Tuple[GroupSummary, ...]
	by_genre: Tuple[GroupSummary, ...]
	by_decade: Tuple[GroupSummary, ...]
	top_movies: TopMovieSets
	summary: DatasetSummary
