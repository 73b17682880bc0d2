"""
Data loading and normalization module.
Handles loading raw movie rows from CSV/JSONL and turning them into validated MovieRecord objects.
"""

# Standard libs for JSON parsing, regex, finiteness checks and paths
import json  # read JSON lines
import math  # reject inf/nan values
import re  # leading-number extraction
from typing import Any, List, Optional  # type hints
from pathlib import Path  # filesystem-safe paths

# pandas reads the CSV export of the dataset
import pandas as pd  # CSV reader

# Import our data classes and the metric helpers used during normalization
from .models import MovieRecord, RawRecord  # structured movie record
from .metrics import derive_metrics, is_valid_record  # profit/ROI and validity rule

# Console logging
from loguru import logger  # console logger


# Placeholder used for every missing text field
UNKNOWN = 'Unknown'

# Leading float such as "7.5", "-3", ".5" or "1e6" (anything after it is ignored)
_LEADING_FLOAT = re.compile(r'^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?')
# Leading integer such as "1999" in "1999" or "1999 (USA)"
_LEADING_INT = re.compile(r'^\s*[+-]?\d+')


class DataLoader:
	"""
	Handles loading and normalization of movie data.
	Normalization never raises: malformed values fall back to documented defaults
	and the is_valid flag decides whether a record takes part in aggregation.
	"""

	# File extensions accepted by load_raw_records
	CSV_SUFFIXES = ('.csv',)
	JSONL_SUFFIXES = ('.jsonl', '.ndjson')

	def load_raw_records(self, filepath: str) -> List[RawRecord]:
		"""
		Load raw rows from a CSV or JSON Lines file, chosen by extension.
		Raises FileNotFoundError if the file is missing and ValueError for unknown formats.
		"""
		suffix = Path(filepath).suffix.lower()  # decide which reader to use
		if suffix in self.CSV_SUFFIXES:
			return self.load_raw_records_from_csv(filepath)
		if suffix in self.JSONL_SUFFIXES:
			return self.load_raw_records_from_jsonl(filepath)
		raise ValueError(f"Unsupported movie data format '{suffix}' for {filepath}")

	def load_raw_records_from_csv(self, filepath: str) -> List[RawRecord]:
		"""
		Load a CSV file where each row is one movie.
		Every cell is kept as a string so that parsing rules stay in normalize().
		"""
		filepath = Path(filepath)  # normalize path

		# Validate the file presence early to give clear error messages
		if not filepath.exists():
			raise FileNotFoundError(f"Movie data file not found: {filepath}")

		logger.info(f"[DataLoader] Loading movies from {filepath}...")  # log action

		# dtype=str + keep_default_na=False: empty cells stay '' instead of becoming NaN
		try:
			frame = pd.read_csv(filepath, dtype=str, keep_default_na=False, encoding='utf-8')
		except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
			logger.error(f"[DataLoader] Could not read {filepath}: {e}")  # unreadable source
			raise

		rows = frame.to_dict(orient='records')  # list of {column: value}
		logger.info(f"[DataLoader] Loaded {len(rows)} raw rows.")  # summary
		return rows  # return list

	def load_raw_records_from_jsonl(self, filepath: str) -> List[RawRecord]:
		"""
		Load a JSON Lines (JSONL) file where each line is one JSON object.
		Lines that are not JSON objects are skipped with a warning.
		"""
		rows = []  # accumulator for raw row dicts
		filepath = Path(filepath)  # normalize path

		# Validate the file presence early to give clear error messages
		if not filepath.exists():
			raise FileNotFoundError(f"Movie data file not found: {filepath}")

		logger.info(f"[DataLoader] Loading movies from {filepath}...")  # log action

		# Open the file and read line-by-line to handle large datasets efficiently
		with open(filepath, 'r', encoding='utf-8') as f:
			for line_num, line in enumerate(f, 1):  # keep track of line number for diagnostics
				if not line.strip():  # tolerate blank lines
					continue
				try:
					data = json.loads(line.strip())  # parse JSON object per line
				except json.JSONDecodeError as e:
					logger.warning(f"[DataLoader] Skipping invalid JSON at line {line_num}: {e}")  # malformed line
					continue  # move on
				if not isinstance(data, dict):
					logger.warning(f"[DataLoader] Skipping non-object JSON at line {line_num}")  # e.g. a bare list
					continue  # move on
				rows.append(data)  # collect

		logger.info(f"[DataLoader] Loaded {len(rows)} raw rows.")  # summary
		return rows  # return list

	def normalize(self, raw: RawRecord) -> MovieRecord:
		"""
		Convert a raw row (strings or JSON scalars) into a typed MovieRecord.
		Pure and total: any combination of missing/malformed fields yields a full record.
		"""
		# Financial fields accept thousands separators ("1,000,000")
		budget = self._parse_non_negative(raw.get('budget'))  # float budget or 0
		gross = self._parse_non_negative(raw.get('gross'))  # float gross or 0
		votes = int(self._parse_non_negative(raw.get('votes')))  # int vote count or 0

		# Score and runtime are plain decimals
		rating = self._parse_non_negative(raw.get('score'), strip_separators=False)  # float rating or 0
		runtime = self._parse_non_negative(raw.get('runtime'), strip_separators=False)  # minutes or 0

		# Year stays None when unparsable so the record is flagged invalid
		year = self._parse_year(raw.get('year'))
		decade = (year // 10) * 10 if year is not None else None  # always derived from year

		metrics = derive_metrics(budget, gross)  # profit, margin, ROI

		# Assemble the record with defaults for every missing text field
		return MovieRecord(
			name=self._parse_text(raw.get('name')),
			year=year,
			decade=decade,
			genre=self._parse_genre(raw.get('genre')),
			rating=rating,
			votes=votes,
			budget=budget,
			gross=gross,
			profit=metrics.profit,
			profit_margin=metrics.profit_margin,
			roi=metrics.roi,
			runtime=runtime,
			director=self._parse_text(raw.get('director')),
			star=self._parse_text(raw.get('star')),
			company=self._parse_text(raw.get('company')),
			country=self._parse_text(raw.get('country')),
			is_valid=is_valid_record(budget, gross, year),
		)

	def _parse_number(self, value: Any, strip_separators: bool = True) -> float:
		"""
		Parse the leading number of a value; anything unparsable, empty or non-finite becomes 0.
		Native ints/floats (from JSON) are used as they are.
		"""
		if value is None or isinstance(value, bool):  # missing, or a JSON true/false
			return 0.0
		if isinstance(value, (int, float)):  # already numeric
			number = float(value)
		else:
			text = str(value)  # coerce anything else to text
			if strip_separators:
				text = text.replace(',', '')  # "1,000,000" -> "1000000"
			match = _LEADING_FLOAT.match(text)  # e.g. "7.5/10" -> "7.5"
			if not match:
				return 0.0
			number = float(match.group(0))
		return number if math.isfinite(number) else 0.0  # "1e999" overflows to inf

	def _parse_non_negative(self, value: Any, strip_separators: bool = True) -> float:
		"""Parse a quantity that cannot be negative (money, votes, minutes, score)."""
		return max(0.0, self._parse_number(value, strip_separators))

	def _parse_year(self, value: Any) -> Optional[int]:
		"""Parse the leading integer of a year field; None signals an unusable year."""
		if value is None or isinstance(value, bool):
			return None
		if isinstance(value, int):
			return value
		if isinstance(value, float):
			return int(value) if math.isfinite(value) else None  # 1999.0 -> 1999
		match = _LEADING_INT.match(str(value))  # "1999 (USA)" -> 1999
		return int(match.group(0)) if match else None

	def _parse_text(self, value: Any) -> str:
		"""Trim a text field; missing or blank values become "Unknown"."""
		if value is None:
			return UNKNOWN
		text = str(value).strip()
		return text or UNKNOWN  # whitespace-only counts as missing, unlike a bare `or` default

	def _parse_genre(self, value: Any) -> str:
		"""Keep only the primary genre: "Action, Adventure" -> "Action"."""
		if value is None:
			return UNKNOWN
		primary = str(value).split(',')[0].strip()  # first comma-separated token
		return primary or UNKNOWN  # ", Drama" -> "Unknown" rather than an empty genre key
