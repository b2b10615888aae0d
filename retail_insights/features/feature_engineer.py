"""
Derived categorical features for transaction records.

Region, generation and quarter are computed from country, age and month name
by pure lookup functions. Inputs outside a function's domain map to ``None``
(region maps them to ``"Other"``) so the final missing-value drop removes them.
"""

import logging
from typing import Any, Dict, Optional

import pandas as pd

from retail_insights.config import ColumnConfig, FeatureConfig, DEFAULT_REGION_MAP

logger = logging.getLogger(__name__)

REGION_COLUMN = 'Region'
GENERATION_COLUMN = 'Generation'
QUARTER_COLUMN = 'Quarter'

OTHER_REGION = 'Other'
REGIONS = ['North America', 'Europe', 'Oceania', OTHER_REGION]

# (lower bound inclusive, label); each band ends where the next begins
GENERATION_BANDS = [
    (18, 'Gen Z'),
    (27, 'Millennials'),
    (43, 'Gen X'),
    (59, 'Boomers'),
]
GENERATIONS = [label for _, label in GENERATION_BANDS]

MONTH_QUARTERS = {
    'January': 'Q1', 'February': 'Q1', 'March': 'Q1',
    'April': 'Q2', 'May': 'Q2', 'June': 'Q2',
    'July': 'Q3', 'August': 'Q3', 'September': 'Q3',
    'October': 'Q4', 'November': 'Q4', 'December': 'Q4',
}
QUARTERS = ['Q1', 'Q2', 'Q3', 'Q4']


def map_region(country: Any, region_map: Optional[Dict[str, str]] = None) -> str:
    """Map a country to its region; countries not in the table map to 'Other'."""
    table = DEFAULT_REGION_MAP if region_map is None else region_map
    if not isinstance(country, str):
        return OTHER_REGION
    return table.get(country, OTHER_REGION)


def map_generation(age: Any) -> Optional[str]:
    """Map an age to a generation label, or None when missing or under 18."""
    if age is None or isinstance(age, bool):
        return None
    try:
        age = float(age)
    except (TypeError, ValueError):
        return None
    if pd.isna(age):
        return None

    label = None
    for lower, name in GENERATION_BANDS:
        if age >= lower:
            label = name
    return label


def map_quarter(month: Any) -> Optional[str]:
    """Map a full English month name to its quarter, or None if unrecognised."""
    if not isinstance(month, str):
        return None
    return MONTH_QUARTERS.get(month)


class FeatureEngineer:
    """Adds region, generation and quarter columns to a transaction table."""

    def __init__(self, config: Optional[FeatureConfig] = None, columns: Optional[ColumnConfig] = None):
        self.config = config or FeatureConfig()
        self.columns = columns or ColumnConfig()

    def add_region(self, df: pd.DataFrame) -> pd.DataFrame:
        df = df.copy()
        region_map = self.config.region_map
        df[REGION_COLUMN] = df[self.columns.country].map(lambda c: map_region(c, region_map))
        logger.info(f"Added {REGION_COLUMN}: {df[REGION_COLUMN].value_counts().to_dict()}")
        return df

    def add_generation(self, df: pd.DataFrame) -> pd.DataFrame:
        df = df.copy()
        df[GENERATION_COLUMN] = df[self.columns.age].map(map_generation)
        unclassified = int(df[GENERATION_COLUMN].isna().sum())
        if unclassified:
            logger.info(f"{unclassified} rows have no {GENERATION_COLUMN} (age missing or under 18)")
        return df

    def add_quarter(self, df: pd.DataFrame) -> pd.DataFrame:
        df = df.copy()
        df[QUARTER_COLUMN] = df[self.columns.month].map(map_quarter)
        unclassified = int(df[QUARTER_COLUMN].isna().sum())
        if unclassified:
            logger.warning(f"{unclassified} rows have an unrecognised month name")
        return df

    def generate_features(self, df: pd.DataFrame) -> pd.DataFrame:
        """Apply region, generation and quarter derivations in that order."""
        df = self.add_region(df)
        df = self.add_generation(df)
        df = self.add_quarter(df)
        return df
