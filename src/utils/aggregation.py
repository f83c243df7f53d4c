"""
Rating aggregations.

Group-and-average helpers over the ratings frame produced by
SportsCatalog.ratings_frame().
"""

import logging
from typing import Dict, List

import pandas as pd

logger = logging.getLogger(__name__)

RATING_COLUMNS = ["product", "user", "stars", "comment", "activity", "category"]


def build_ratings_frame(rows: List[Dict]) -> pd.DataFrame:
    """
    Build the ratings frame from row dicts.

    Args:
        rows: One dict per rating, keyed by RATING_COLUMNS

    Returns:
        DataFrame with exactly RATING_COLUMNS, in insertion order
    """
    frame = pd.DataFrame(rows, columns=RATING_COLUMNS)
    if not frame.empty:
        frame["stars"] = frame["stars"].astype("int64")
    return frame


def _sum_and_count(frame: pd.DataFrame, column: str) -> pd.DataFrame:
    """Star totals and rating counts per value of `column`, sorted by it."""
    return frame.groupby(column, sort=True)["stars"].agg(["sum", "count"])


def mean_stars_by(frame: pd.DataFrame, column: str) -> Dict[str, float]:
    """
    Average stars per distinct value of `column`.

    Rows where `column` is missing are ignored, so groups with no ratings
    never appear.

    Args:
        frame: Ratings frame
        column: Grouping column (e.g. "activity", "category")

    Returns:
        Dict of group value -> mean stars, ascending by group value
    """
    rated = frame.dropna(subset=[column])
    if rated.empty:
        return {}

    totals = _sum_and_count(rated, column)
    result = {
        key: int(row["sum"]) / int(row["count"])
        for key, row in totals.iterrows()
    }
    logger.debug(f"Computed mean stars for {len(result)} {column} groups")
    return result


def group_products_by_mean(frame: pd.DataFrame) -> Dict[float, List[str]]:
    """
    Group catalog products by their exact mean stars.

    Only rows with an activity (products registered in the catalog) are
    considered. Products averaging 0.0 are left out.

    Returns:
        Dict of mean stars -> sorted product names, descending by mean
    """
    registered = frame.dropna(subset=["activity"])
    if registered.empty:
        return {}

    totals = _sum_and_count(registered, "product")
    means = totals["sum"] / totals["count"]
    means = means[means > 0]

    groups: Dict[float, List[str]] = {}
    for mean in sorted(means.unique(), reverse=True):
        names = means.index[means == mean].tolist()
        groups[float(mean)] = sorted(names)

    logger.debug(f"Grouped {len(means)} products into {len(groups)} star levels")
    return groups
