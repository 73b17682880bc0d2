"""
FastAPI server exposing the processed box office dataset.
Endpoints:
- GET /health: basic health check
- GET /summary: dataset-wide statistics
- GET /years?through=2000: per-year statistics (optionally up to a year)
- GET /decades: per-decade statistics
- GET /genres?decade=1990s&min_count=5&genre=drama: per-genre statistics with view filters
- GET /top/{ordering}?n=20: leaderboard by gross, profit, roi or rating
- GET /insights?min_profit=0: success insights for movies above a profit threshold

Startup runs the pipeline once over the configured data file (BOXOFFICE_DATA_PATH).
"""

# Import standard libraries for timing
import time  # measure startup and request latencies
from typing import List, Optional  # precise typing for clarity

# Import FastAPI for building the web API
from fastapi import FastAPI, HTTPException, Query  # FastAPI primitives

# Import our internal modules for processing and response schemas
from boxoffice.config import get_settings  # BOXOFFICE_* settings
from boxoffice.models import ProcessedDataset  # pipeline output
from boxoffice.pipeline import DataPipeline  # load + process
from boxoffice.aggregation import filter_genre_groups, groups_through_year, parse_decade_label, resolve_genre  # genre/year views
from boxoffice.ranking import select_by_profit  # profit-threshold selection
from boxoffice.summary import build_insights  # success insights
from boxoffice.schemas import DatasetSummaryOut, GroupSummaryOut, MovieOut, SuccessInsightsOut  # response models

# Import loguru for simple, structured console logging
from loguru import logger  # convenient console logger

# Instantiate the FastAPI application with metadata
app = FastAPI(title="Box Office Analytics API", version="1.0.0")  # web app

# Globals that hold the pipeline, its output and measured startup time
PIPELINE: Optional[DataPipeline] = None  # configured pipeline
DATASET: Optional[ProcessedDataset] = None  # will point to the processed dataset
STARTUP_TIME_S: float = 0.0  # measures how long startup took


# FastAPI startup hook to process the dataset once
@app.on_event("startup")
async def startup_event():
	"""Load and process the dataset; a missing or unreadable source aborts startup."""
	global PIPELINE, DATASET, STARTUP_TIME_S  # refer to module-level globals
	start = time.time()  # start timer for startup latency

	settings = get_settings()  # environment-driven configuration
	logger.info(f"[API] Startup: processing movies from {settings.data_path}...")  # log intent

	PIPELINE = DataPipeline(settings)  # configured pipeline
	DATASET = PIPELINE.run()  # raises on ingestion failure

	# Compute and log startup duration
	STARTUP_TIME_S = time.time() - start  # elapsed seconds
	logger.info(f"[API] Startup complete in {STARTUP_TIME_S:.2f}s with {DATASET.summary.total_movies} movies.")  # summary log


def _require_dataset() -> ProcessedDataset:
	"""Return the processed dataset or fail with 503 while it is not available."""
	if DATASET is None:  # startup has not finished
		logger.warning("[API] Request received but dataset not processed")  # guard log
		raise HTTPException(status_code=503, detail="Dataset not loaded")
	return DATASET


# Simple health endpoint for readiness checks
@app.get("/health")
async def health():
	"""Return minimal health info for liveness/readiness probes."""
	return {
		"status": "ok",  # constant indicator
		"dataset_ready": DATASET is not None,  # True if pipeline finished
		"startup_seconds": round(STARTUP_TIME_S, 2)  # startup latency
	}


@app.get("/summary", response_model=DatasetSummaryOut, response_model_by_alias=True)
async def summary():
	"""Dataset-wide statistics over the filtered movies."""
	return DatasetSummaryOut.model_validate(_require_dataset().summary)


@app.get("/years", response_model=List[GroupSummaryOut], response_model_by_alias=True)
async def years(through: Optional[int] = Query(None, description="Last year to include")):
	"""Per-year statistics, ascending; optionally cut off after a given year."""
	groups = _require_dataset().by_year  # all years
	if through is not None:
		groups = groups_through_year(groups, through)  # progressive timeline
	return [GroupSummaryOut.model_validate(g) for g in groups]


@app.get("/decades", response_model=List[GroupSummaryOut], response_model_by_alias=True)
async def decades():
	"""Per-decade statistics, ascending."""
	return [GroupSummaryOut.model_validate(g) for g in _require_dataset().by_decade]


@app.get("/genres", response_model=List[GroupSummaryOut], response_model_by_alias=True)
async def genres(
	decade: str = Query('all', description="Decade label such as '1990s', or 'all'"),
	min_count: Optional[int] = Query(None, ge=1, description="Minimum movies per genre"),
	genre: Optional[str] = Query(None, description="Single genre to show (fuzzy matched)"),
):
	"""Per-genre statistics, highest average gross first, with optional view filters."""
	dataset = _require_dataset()
	try:
		decade_start = parse_decade_label(decade)  # '1990s' -> 1990
	except ValueError as e:
		raise HTTPException(status_code=422, detail=str(e))

	selected = None  # no genre restriction by default
	if genre:
		known = [g.key for g in dataset.by_genre]  # reportable genres only
		selected = resolve_genre(genre, known)  # tolerate typos and casing
		if selected is None:
			raise HTTPException(status_code=404, detail=f"Unknown genre: {genre}")
		logger.debug(f"[API] /genres resolved '{genre}' -> '{selected}'")  # trace

	groups = filter_genre_groups(
		dataset.by_genre,
		decade=decade_start,
		min_count=min_count if min_count is not None else PIPELINE.settings.min_genre_count,
		genre=selected,
	)
	return [GroupSummaryOut.model_validate(g) for g in groups]


@app.get("/top/{ordering}", response_model=List[MovieOut], response_model_by_alias=True)
async def top(ordering: str, n: int = Query(20, ge=1, le=500, description="Number of movies")):
	"""Leaderboard for one ordering over the filtered movies."""
	dataset = _require_dataset()
	start = time.time()  # start timer
	try:
		ranked = PIPELINE.ranker.rank(dataset.raw, ordering, n)  # delegate to ranker
	except ValueError as e:
		raise HTTPException(status_code=404, detail=str(e))
	elapsed_ms = (time.time() - start) * 1000  # compute ms
	logger.info(f"[API] /top/{ordering} served {len(ranked)} movies in {elapsed_ms:.2f} ms")  # summary
	return [MovieOut.model_validate(m) for m in ranked]


@app.get("/insights", response_model=SuccessInsightsOut, response_model_by_alias=True)
async def insights(min_profit: float = Query(0, description="Minimum profit in dollars")):
	"""Success insights for movies with at least the given profit."""
	dataset = _require_dataset()
	selection = select_by_profit(dataset.raw, min_profit)  # threshold view
	logger.debug(f"[API] /insights min_profit={min_profit} selected={len(selection)}")  # trace
	return SuccessInsightsOut.model_validate(build_insights(selection, PIPELINE.ranker))
