"""
Summary module.
Dataset-wide statistics and success insights over a set of movies.
"""

from typing import Optional, Sequence

import numpy as np

from .models import DatasetSummary, MovieRecord, SuccessInsights
from .ranking import Ranker


# Runtime window (minutes, inclusive) treated as the audience "sweet spot"
SWEET_SPOT_RUNTIME = (90, 120)
# Gross within this fraction of the budget counts as breaking even
BREAK_EVEN_TOLERANCE = 0.1
# Number of movies featured in each insight leaderboard
INSIGHT_TOP_N = 3


def summarize(records: Sequence[MovieRecord]) -> DatasetSummary:
	"""
	Compute dataset-wide statistics.

	Unlike group statistics, budget and gross totals/averages include every record,
	zero values too. The rating average only counts rated movies.
	"""
	if not records:
		return DatasetSummary(
			total_movies=0,
			year_range=(0, 0),
			total_budget=0.0,
			total_gross=0.0,
			avg_budget=0.0,
			avg_gross=0.0,
			avg_rating=0.0,
			genre_count=0,
			profitable_movies=0,
		)

	years = [m.year for m in records]
	budgets = np.array([m.budget for m in records], dtype=float)
	grosses = np.array([m.gross for m in records], dtype=float)
	ratings = [m.rating for m in records if m.rating > 0]

	return DatasetSummary(
		total_movies=len(records),
		year_range=(min(years), max(years)),
		total_budget=float(budgets.sum()),
		total_gross=float(grosses.sum()),
		avg_budget=float(budgets.mean()),
		avg_gross=float(grosses.mean()),
		avg_rating=float(np.mean(ratings)) if ratings else 0.0,
		genre_count=len({m.genre for m in records}),
		profitable_movies=sum(1 for m in records if m.profit > 0),
	)


def build_insights(records: Sequence[MovieRecord], ranker: Optional[Ranker] = None) -> SuccessInsights:
	"""Headline success figures for a selection of movies (see SuccessInsights)."""
	ranker = ranker or Ranker()
	top_profit = ranker.rank(records, 'profit', INSIGHT_TOP_N)
	top_roi = ranker.rank(records, 'roi', INSIGHT_TOP_N)

	break_even = sum(
		1 for m in records
		if m.budget > 0 and abs(m.gross - m.budget) / m.budget < BREAK_EVEN_TOLERANCE
	)

	low, high = SWEET_SPOT_RUNTIME
	sweet_spot_profits = [m.profit for m in records if low <= m.runtime <= high]
	profits = [m.profit for m in records]
	profitable = sum(1 for p in profits if p > 0)

	return SuccessInsights(
		top_profit=top_profit,
		top_profit_total=float(sum(m.profit for m in top_profit)),
		top_roi=top_roi,
		break_even_movies=break_even,
		sweet_spot_avg_profit=float(np.mean(sweet_spot_profits)) if sweet_spot_profits else 0.0,
		overall_avg_profit=float(np.mean(profits)) if profits else 0.0,
		profitable_percent=profitable / len(records) * 100 if records else 0.0,
	)
