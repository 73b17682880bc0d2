"""
Streamlit explorer for the Box Office dataset.
Runs the processing pipeline locally over the configured data file and shows
the yearly trend, genre comparison and leaderboards.

Run UI:                streamlit run streamlit_app.py
"""

# pandas turns the group summaries into chart-friendly tables
import pandas as pd  # tabular display
# Streamlit framework to build a simple interactive UI
import streamlit as st  # UI primitives
# Typing to make function signatures clearer
from typing import List, Optional  # indicates values can be None

# Local pipeline imports
from boxoffice.config import get_settings  # BOXOFFICE_* settings
from boxoffice.models import GroupSummary, MovieRecord, ProcessedDataset  # output types
from boxoffice.pipeline import DataPipeline  # load + process
from boxoffice.aggregation import filter_genre_groups, groups_through_year, parse_decade_label  # view filters
from boxoffice.ranking import select_by_profit  # profit-threshold selection
from boxoffice.summary import build_insights  # success insights
from boxoffice.formatting import format_currency, format_number  # display helpers

# Configure Streamlit page (title and layout width)
st.set_page_config(page_title="Box Office Analytics", layout="wide")  # wide layout

# Main page title
st.title("🎬 Hollywood's Financial Evolution (1980-2015)")  # friendly header


# Cache the processed dataset so the pipeline runs once per session
@st.cache_resource(show_spinner=True)
def load_dataset() -> Optional[ProcessedDataset]:
	"""Run the pipeline over the configured data file."""
	try:
		return DataPipeline(get_settings()).run()  # load + process
	except Exception as e:
		# Show an error in the UI so users know why nothing renders
		st.error(f"Failed to load movie data: {e}. Check that the data file is available.")
		return None  # signal failure


def groups_frame(groups: List[GroupSummary]) -> pd.DataFrame:
	"""One row per group with the headline statistics."""
	return pd.DataFrame([
		{
			"key": g.key,
			"movies": g.count,
			"avg budget": g.avg_budget,
			"avg gross": g.avg_gross,
			"avg profit": g.avg_profit,
			"avg rating": round(g.avg_rating, 2),
		}
		for g in groups
	])


def movies_frame(movies: List[MovieRecord]) -> pd.DataFrame:
	"""One row per movie with formatted money columns."""
	return pd.DataFrame([
		{
			"name": m.name,
			"year": m.year,
			"genre": m.genre,
			"budget": format_currency(m.budget),
			"gross": format_currency(m.gross),
			"profit": format_currency(m.profit),
			"roi": round(m.roi, 2),
			"rating": m.rating,
			"votes": format_number(m.votes),
		}
		for m in movies
	])


dataset = load_dataset()
if dataset is None:
	st.stop()  # nothing else can render
if dataset.summary.total_movies == 0:
	st.warning("No valid movies in the selected year window.")
	st.stop()

summary = dataset.summary
c1, c2, c3, c4 = st.columns(4)  # headline metrics
c1.metric("Movies", format_number(summary.total_movies))
c2.metric("Total gross", format_currency(summary.total_gross))
c3.metric("Average budget", format_currency(summary.avg_budget))
c4.metric("Profitable", f"{summary.profitable_movies / max(1, summary.total_movies) * 100:.0f}%")

tab_years, tab_genres, tab_success = st.tabs(["Financial evolution", "Genres", "Success factors"])

with tab_years:
	first, last = summary.year_range
	current_year = last  # single-year datasets have nothing to slide over
	if first < last:
		current_year = st.slider("Show years up to", min_value=first, max_value=last, value=last)
	frame = groups_frame(groups_through_year(dataset.by_year, current_year))
	if not frame.empty:
		st.line_chart(frame.set_index("key")[["avg budget", "avg gross", "avg profit"]])
	st.dataframe(frame, use_container_width=True)

with tab_genres:
	col1, col2 = st.columns(2)
	with col1:
		time_range = st.selectbox("Time range", ["all", "1980s", "1990s", "2000s", "2010s"])
	with col2:
		min_count = st.slider("Minimum movies per genre", min_value=1, max_value=50, value=get_settings().min_genre_count)
	genres = filter_genre_groups(dataset.by_genre, decade=parse_decade_label(time_range), min_count=min_count)
	frame = groups_frame(genres)
	if not frame.empty:
		st.bar_chart(frame.set_index("key")[["avg budget", "avg gross"]])
	st.dataframe(frame, use_container_width=True)

with tab_success:
	min_profit = st.number_input("Minimum profit ($)", value=0, step=10_000_000)
	selection = select_by_profit(dataset.raw, min_profit)
	if not selection:
		st.info("No data available for current filters.")
	else:
		found = build_insights(selection)
		st.write(
			f"Top 3 most profitable films: **{', '.join(m.name for m in found.top_profit)}** "
			f"with combined profits of {format_currency(found.top_profit_total)}."
		)
		st.write(f"{found.profitable_percent:.0f}% of selected movies generated profits; "
			f"{found.break_even_movies} roughly broke even.")
		st.write(
			f"90-120 minute movies average {format_currency(found.sweet_spot_avg_profit)} profit "
			f"vs {format_currency(found.overall_avg_profit)} overall."
		)
	board = st.radio("Leaderboard", ["gross", "profit", "roi", "rating"], horizontal=True)
	st.dataframe(movies_frame(list(getattr(dataset.top_movies, f"by_{board}"))), use_container_width=True)
