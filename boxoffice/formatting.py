"""
Display formatting helpers for money and counts.
"""

from decimal import Decimal, ROUND_HALF_UP

_ONE_DECIMAL = Decimal('0.1')
_WHOLE = Decimal('1')

def _round(value: float, step: Decimal) -> str:
	"""Round half away from zero on the exact binary value: 1.25 -> "1.3", 998.5 -> "999"."""
	return format(Decimal(value).quantize(step, rounding=ROUND_HALF_UP), 'f')

def format_currency(value: float) -> str:
	"""Format dollars with a B/M/K suffix and one decimal: 1500000 -> "$1.5M", 999 -> "$999"."""
	if value >= 1_000_000_000:
		return f"${_round(value / 1_000_000_000, _ONE_DECIMAL)}B"
	if value >= 1_000_000:
		return f"${_round(value / 1_000_000, _ONE_DECIMAL)}M"
	if value >= 1_000:
		return f"${_round(value / 1_000, _ONE_DECIMAL)}K"
	return f"${_round(value, _WHOLE)}"

def format_number(value: float) -> str:
	"""Format a count with an M/K suffix and one decimal: 25000 -> "25.0K", 42 -> "42"."""
	if value >= 1_000_000:
		return f"{_round(value / 1_000_000, _ONE_DECIMAL)}M"
	if value >= 1_000:
		return f"{_round(value / 1_000, _ONE_DECIMAL)}K"
	return _round(value, _WHOLE)
