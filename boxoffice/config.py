"""
Pipeline configuration.
Defaults reproduce the published analysis window; every value can be overridden with a
BOXOFFICE_* environment variable (e.g. BOXOFFICE_MIN_YEAR=1990).
"""

import os  # environment-based overrides
from dataclasses import dataclass  # immutable settings container
from functools import lru_cache  # build settings once per process


ENV_PREFIX = 'BOXOFFICE_'


@dataclass(frozen=True)
class PipelineSettings:
	data_path: str = 'data/movies.csv'  # CSV or JSONL source file
	min_year: int = 1980  # first year kept after validation
	max_year: int = 2015  # last year kept after validation
	min_genre_count: int = 5  # genres with fewer movies are dropped from genre stats
	top_n: int = 20  # leaderboard length
	roi_min_budget: float = 1_000_000  # ROI leaderboard ignores micro-budget movies
	rating_min_votes: int = 10_000  # rating leaderboard ignores rarely-voted movies

	@classmethod
	def from_env(cls) -> 'PipelineSettings':
		"""Build settings from defaults overridden by BOXOFFICE_* environment variables."""
		defaults = cls()
		return cls(
			data_path=os.getenv(f'{ENV_PREFIX}DATA_PATH', defaults.data_path),
			min_year=_get_int_env('MIN_YEAR', defaults.min_year),
			max_year=_get_int_env('MAX_YEAR', defaults.max_year),
			min_genre_count=_get_int_env('MIN_GENRE_COUNT', defaults.min_genre_count),
			top_n=_get_int_env('TOP_N', defaults.top_n),
			roi_min_budget=_get_float_env('ROI_MIN_BUDGET', defaults.roi_min_budget),
			rating_min_votes=_get_int_env('RATING_MIN_VOTES', defaults.rating_min_votes),
		)


def _get_int_env(name: str, default: int) -> int:
	raw = os.getenv(ENV_PREFIX + name)
	if raw is None or not raw.strip():
		return default
	try:
		return int(raw.strip())
	except ValueError:
		raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from None


def _get_float_env(name: str, default: float) -> float:
	raw = os.getenv(ENV_PREFIX + name)
	if raw is None or not raw.strip():
		return default
	try:
		return float(raw.strip())
	except ValueError:
		raise ValueError(f"{ENV_PREFIX}{name} must be a number, got {raw!r}") from None


@lru_cache(maxsize=1)
def get_settings() -> PipelineSettings:
	"""Return the process-wide settings, read from the environment on first use."""
	return PipelineSettings.from_env()
