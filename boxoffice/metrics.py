"""
Financial metric derivation.
Computes profit, profit margin and ROI from a budget/gross pair, and the record validity rule.
"""

from typing import Optional

from .models import FinancialMetrics

# Years at or before this one are treated as data-entry errors
MIN_VALID_YEAR = 1900


def derive_metrics(budget: float, gross: float) -> FinancialMetrics:
	"""
	Derive profit figures from budget and gross.
	Margin and ROI are 0 when there is no budget to divide by.
	"""
	profit = gross - budget
	if budget > 0:
		profit_margin = profit / budget * 100
		roi = gross / budget
	else:
		profit_margin = 0.0
		roi = 0.0
	return FinancialMetrics(profit=profit, profit_margin=profit_margin, roi=roi)


def is_valid_record(budget: float, gross: float, year: Optional[int]) -> bool:
	"""A record is usable for aggregation only with real financials and a plausible year."""
	return budget > 0 and gross > 0 and year is not None and year > MIN_VALID_YEAR
