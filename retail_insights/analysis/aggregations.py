"""
Descriptive aggregations over the cleaned transaction table.

Every function reads the cleaned table without modifying it and returns a
small, freshly built DataFrame ready for plotting.
"""

import logging
from typing import Dict, Optional

import pandas as pd

from retail_insights.config import ColumnConfig
from retail_insights.features.feature_engineer import (
    GENERATION_COLUMN, GENERATIONS, QUARTER_COLUMN, QUARTERS, REGION_COLUMN,
)

logger = logging.getLogger(__name__)


def _cols(columns: Optional[ColumnConfig]) -> ColumnConfig:
    return columns or ColumnConfig()


def spending_by_segment(df: pd.DataFrame, columns: Optional[ColumnConfig] = None) -> pd.DataFrame:
    """Total spending per customer segment, largest first."""
    cols = _cols(columns)
    result = (
        df.groupby(cols.segment)[cols.amount]
          .sum()
          .sort_values(ascending=False)
          .reset_index()
    )
    return result


def rating_by_generation(df: pd.DataFrame, columns: Optional[ColumnConfig] = None) -> pd.DataFrame:
    """Mean rating per generation, youngest cohort first."""
    cols = _cols(columns)
    means = df.groupby(GENERATION_COLUMN)[cols.rating].mean()
    order = [g for g in GENERATIONS if g in means.index]
    return means.reindex(order).rename_axis(GENERATION_COLUMN).reset_index()


def spending_vs_rating(df: pd.DataFrame, columns: Optional[ColumnConfig] = None) -> pd.DataFrame:
    """Raw (spending, rating) pairs for a scatter plot."""
    cols = _cols(columns)
    return df[[cols.amount, cols.rating]].reset_index(drop=True)


def spending_by_quarter(df: pd.DataFrame, columns: Optional[ColumnConfig] = None) -> pd.DataFrame:
    """Total spending per quarter, Q1 to Q4."""
    cols = _cols(columns)
    totals = df.groupby(QUARTER_COLUMN)[cols.amount].sum()
    order = [q for q in QUARTERS if q in totals.index]
    return totals.reindex(order).rename_axis(QUARTER_COLUMN).reset_index()


def rating_by_region(df: pd.DataFrame, columns: Optional[ColumnConfig] = None) -> pd.DataFrame:
    """Mean rating per region."""
    cols = _cols(columns)
    return df.groupby(REGION_COLUMN)[cols.rating].mean().reset_index()


AGGREGATIONS = {
    'spending_by_segment': spending_by_segment,
    'rating_by_generation': rating_by_generation,
    'spending_vs_rating': spending_vs_rating,
    'spending_by_quarter': spending_by_quarter,
    'rating_by_region': rating_by_region,
}


def run_all_aggregations(df: pd.DataFrame, columns: Optional[ColumnConfig] = None) -> Dict[str, pd.DataFrame]:
    """Compute every aggregation table, keyed by name."""
    results = {}
    for name, func in AGGREGATIONS.items():
        results[name] = func(df, columns)
        logger.info(f"Computed {name}: {len(results[name])} rows")
    return results
