"""
Pipeline module.
Sequences normalization, filtering, aggregation, ranking and summary into one ProcessedDataset.
"""

from typing import Iterable, List, Optional  # type annotations for clarity

# Import project modules for data structures and components
from .models import MovieRecord, ProcessedDataset, RawRecord  # core data classes
from .config import PipelineSettings  # thresholds and source location
from .data_loader import DataLoader  # ingestion + normalization
from .aggregation import group_by_year, group_by_genre, group_by_decade  # grouping
from .ranking import Ranker  # leaderboards
from .summary import summarize  # dataset-wide statistics

# Import loguru for console logging
from loguru import logger  # simple structured logger


class DataPipeline:
	"""
	High-level processing API: raw rows in, immutable ProcessedDataset out.
	Each call to process() is independent; nothing from a previous run is kept.
	"""
	def __init__(self, settings: Optional[PipelineSettings] = None):
		# Fall back to the built-in defaults (1980-2015 window, top 20, ...)
		self.settings = settings or PipelineSettings()  # keep configuration reference
		# Shared components; both are stateless between runs
		self.loader = DataLoader()  # normalizer
		self.ranker = Ranker(
			n=self.settings.top_n,  # leaderboard length
			roi_min_budget=self.settings.roi_min_budget,  # ROI eligibility
			rating_min_votes=self.settings.rating_min_votes,  # rating eligibility
		)

	def normalize_all(self, raw_records: Iterable[RawRecord]) -> List[MovieRecord]:
		"""Normalize every raw row; raises TypeError if the input cannot be iterated."""
		return [self.loader.normalize(raw) for raw in raw_records]

	def filter_records(self, records: Iterable[MovieRecord]) -> List[MovieRecord]:
		"""Keep valid records inside the configured year window, in input order."""
		low, high = self.settings.min_year, self.settings.max_year  # analysis window
		return [m for m in records if m.is_valid and low <= m.year <= high]

	def process(self, raw_records: Iterable[RawRecord]) -> ProcessedDataset:
		"""Run every stage over the raw rows and assemble the processed dataset."""
		logger.info("[Pipeline] Processing data...")  # progress

		# 1) Normalize every row (never raises for a bad row)
		normalized = self.normalize_all(raw_records)

		# 2) Structural validity, then the year window
		records = self.filter_records(normalized)
		logger.info(
			f"[Pipeline] Cleaned data: {len(records)} valid movies of {len(normalized)} rows "
			f"({self.settings.min_year}-{self.settings.max_year})"
		)

		# 3-5) Aggregates, leaderboards and the summary all read the filtered records
		by_year = group_by_year(records)  # ascending by year
		by_genre = group_by_genre(records, min_count=self.settings.min_genre_count)  # by avg gross
		by_decade = group_by_decade(records)  # ascending by decade
		top_movies = self.ranker.top_movies(records)  # four leaderboards
		summary = summarize(records)  # scalar statistics
		logger.debug(
			f"[Pipeline] Groups | years={len(by_year)} genres={len(by_genre)} decades={len(by_decade)}"
		)

		# 6) Assemble the immutable result
		dataset = ProcessedDataset(
			raw=tuple(records),
			by_year=by_year,
			by_genre=by_genre,
			by_decade=by_decade,
			top_movies=top_movies,
			summary=summary,
		)
		logger.info(f"[Pipeline] Data processed successfully: {summary}")  # summary
		return dataset

	def run(self, data_path: Optional[str] = None) -> ProcessedDataset:
		"""
		Load the configured source file and process it.
		Ingestion failures (missing/unreadable file) are logged and re-raised.
		"""
		path = data_path or self.settings.data_path  # explicit path wins over settings
		try:
			raw_records = self.loader.load_raw_records(path)  # read rows as strings
		except Exception as e:
			logger.error(f"[Pipeline] Error loading data from {path}: {e}")  # operator-facing
			raise
		return self.process(raw_records)


def process(raw_records: Iterable[RawRecord]) -> ProcessedDataset:
	"""Process raw rows with the default settings."""
	return DataPipeline().process(raw_records)
