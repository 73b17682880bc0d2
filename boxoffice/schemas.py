"""
Pydantic views of the pipeline output.
Used by the API responses and the JSON export; field names serialize in camelCase
(profit_margin -> profitMargin) to match what the chart layer reads.
"""

from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .models import ProcessedDataset


class _OutModel(BaseModel):
	# Read straight from the frozen dataclasses; accept both snake_case and camelCase input
	model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class MovieOut(_OutModel):
	name: str
	year: Optional[int] = None
	decade: Optional[int] = None
	genre: str
	rating: float
	votes: int
	budget: float
	gross: float
	profit: float
	profit_margin: float
	roi: float
	runtime: float
	director: str
	star: str
	company: str
	country: str
	is_valid: bool


class GroupSummaryOut(_OutModel):
	key: Union[int, str]
	count: int
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
	movies: List[MovieOut]


class TopMovieSetsOut(_OutModel):
	by_gross: List[MovieOut]
	by_profit: List[MovieOut]
	by_roi: List[MovieOut]
	by_rating: List[MovieOut]


class DatasetSummaryOut(_OutModel):
	total_movies: int
	year_range: Tuple[int, int]
	total_budget: float
	total_gross: float
	avg_budget: float
	avg_gross: float
	avg_rating: float
	genre_count: int
	profitable_movies: int


class SuccessInsightsOut(_OutModel):
	top_profit: List[MovieOut]
	top_profit_total: float
	top_roi: List[MovieOut]
	break_even_movies: int
	sweet_spot_avg_profit: float
	overall_avg_profit: float
	profitable_percent: float


class ProcessedDatasetOut(_OutModel):
	raw: List[MovieOut]
	by_year: List[GroupSummaryOut]
	by_genre: List[GroupSummaryOut]
	by_decade: List[GroupSummaryOut]
	top_movies: TopMovieSetsOut
	summary: DatasetSummaryOut


def dataset_to_json(dataset: ProcessedDataset, indent: Optional[int] = None) -> str:
	"""Serialize a processed dataset to camelCase JSON."""
	return ProcessedDatasetOut.model_validate(dataset).model_dump_json(by_alias=True, indent=indent)
