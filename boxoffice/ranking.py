"""
Ranking module.
Produces top-N leaderboards of movies by gross, profit, ROI and rating.
"""

from typing import Callable, Dict, Iterable, List, Optional, Tuple

from .models import MovieRecord, TopMovieSets


class Ranker:
	"""
	Builds leaderboards over the filtered dataset:
	- gross / profit: every movie
	- roi: only movies whose budget exceeds roi_min_budget (micro-budget ROI is not comparable)
	- rating: only movies with more than rating_min_votes votes
	Sorting is stable, so ties keep input order.
	"""

	ORDERINGS = ('gross', 'profit', 'roi', 'rating')

	def __init__(
		self,
		n: int = 20,
		roi_min_budget: float = 1_000_000,
		rating_min_votes: int = 10_000,
	):
		self.n = n
		self.roi_min_budget = roi_min_budget
		self.rating_min_votes = rating_min_votes

	def top_movies(self, records: Iterable[MovieRecord], n: Optional[int] = None) -> TopMovieSets:
		"""Compute all four leaderboards, each with at most n entries."""
		records = list(records)
		n = self.n if n is None else n
		return TopMovieSets(
			by_gross=self.rank(records, 'gross', n),
			by_profit=self.rank(records, 'profit', n),
			by_roi=self.rank(records, 'roi', n),
			by_rating=self.rank(records, 'rating', n),
		)

	def rank(self, records: Iterable[MovieRecord], ordering: str, n: Optional[int] = None) -> Tuple[MovieRecord, ...]:
		"""
		Rank records by one ordering ('gross', 'profit', 'roi' or 'rating'), highest first.
		Raises ValueError for an unknown ordering.
		"""
		if ordering not in self.ORDERINGS:
			raise ValueError(f"Unknown ordering '{ordering}'. Expected one of {', '.join(self.ORDERINGS)}")
		n = self.n if n is None else n
		if n <= 0:
			return ()

		eligible, metric = self._plan(ordering)
		candidates = [m for m in records if eligible(m)]
		# reverse=True keeps equal elements in their original order
		candidates.sort(key=metric, reverse=True)
		return tuple(candidates[:n])

	def _plan(self, ordering: str) -> Tuple[Callable[[MovieRecord], bool], Callable[[MovieRecord], float]]:
		"""Return (eligibility filter, sort metric) for an ordering."""
		plans: Dict[str, Tuple[Callable[[MovieRecord], bool], Callable[[MovieRecord], float]]] = {
			'gross': (lambda m: True, lambda m: m.gross),
			'profit': (lambda m: True, lambda m: m.profit),
			'roi': (lambda m: m.budget > self.roi_min_budget, lambda m: m.roi),
			'rating': (lambda m: m.votes > self.rating_min_votes, lambda m: m.rating),
		}
		return plans[ordering]


def select_by_profit(records: Iterable[MovieRecord], min_profit: float = 0) -> List[MovieRecord]:
	"""Movies with real financials whose profit is at least min_profit, in input order."""
	return [m for m in records if m.profit >= min_profit and m.budget > 0 and m.gross > 0]
