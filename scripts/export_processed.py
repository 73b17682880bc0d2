"""
Process the movie dataset and write the result as JSON.

This script:
1) Loads raw rows from data/movies.csv (or the path given as first argument)
2) Runs the processing pipeline (normalize, filter, aggregate, rank, summarize)
3) Writes the processed dataset to build/processed.json in camelCase

Usage:
    python -m scripts.export_processed [data/movies.csv] [build/processed.json]

The chart layer reads the exported file as-is.
"""

import sys  # command-line arguments
import time  # measure step timings
from pathlib import Path  # filesystem-safe paths

from loguru import logger  # console logging

from boxoffice.config import get_settings  # BOXOFFICE_* settings
from boxoffice.pipeline import DataPipeline  # load + process
from boxoffice.schemas import dataset_to_json  # camelCase serialization
from boxoffice.formatting import format_currency  # readable totals


def main(argv=None):
	argv = sys.argv[1:] if argv is None else argv  # allow programmatic calls

	# Headline banner for visibility in console
	logger.info("=" * 60)
	logger.info("Export Processed Movie Dataset")
	logger.info("=" * 60)

	# Resolve input/output paths
	root = Path(__file__).resolve().parents[1]  # project root
	settings = get_settings()  # defaults + environment overrides
	data_path = Path(argv[0]) if len(argv) > 0 else root / settings.data_path  # input dataset
	out_path = Path(argv[1]) if len(argv) > 1 else root / 'build' / 'processed.json'  # output file
	out_path.parent.mkdir(parents=True, exist_ok=True)  # ensure exists

	# 1-2) Load and process
	logger.info(f"[1/2] Processing {data_path}...")
	t0 = time.time()  # start timer
	dataset = DataPipeline(settings).run(str(data_path))  # raises if the source is unreadable
	summary = dataset.summary
	logger.info(
		f"[OK] {summary.total_movies} movies {summary.year_range[0]}-{summary.year_range[1]} | "
		f"gross {format_currency(summary.total_gross)} | {time.time() - t0:.2f}s"
	)

	# 3) Save
	logger.info(f"[2/2] Writing {out_path}...")
	out_path.write_text(dataset_to_json(dataset), encoding='utf-8')  # camelCase JSON
	logger.info("[OK] Saved.")  # done
	logger.info("=" * 60)
	return out_path


if __name__ == '__main__':
	main()  # invoke exporter
