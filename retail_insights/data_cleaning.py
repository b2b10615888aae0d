"""
Data cleaning for the retail transactions dataset.

Turns the raw CSV into the cleaned table every aggregation reads. The steps run
in a fixed order: derivations happen before the category filter and before the
final missing-value drop.
"""

import logging
from collections import OrderedDict
from typing import Optional

import pandas as pd

from retail_insights.config import PipelineConfig
from retail_insights.features.feature_engineer import FeatureEngineer
from retail_insights.ingest_data import load_transactions, validate_columns

logger = logging.getLogger(__name__)


class DataCleaner:
    """Data cleaner for retail transaction data."""

    def __init__(self, config: Optional[PipelineConfig] = None):
        self.config = config or PipelineConfig.get_default_config()
        self.columns = self.config.columns
        self.feature_engineer = FeatureEngineer(self.config.features, self.columns)
        self.report = OrderedDict()

    def clean_file(self, file_path: str) -> pd.DataFrame:
        """Load a CSV and run every cleaning step on it."""
        logger.info("Starting data cleaning for retail transactions...")
        df = load_transactions(file_path)
        validate_columns(df, self.columns.required())
        return self.clean_data(df)

    def clean_data(self, df: pd.DataFrame) -> pd.DataFrame:
        """Run the cleaning steps on an already loaded table."""
        self.report = OrderedDict()
        self.report['rows_loaded'] = len(df)
        logger.info(f"Raw data shape: {df.shape}")

        df_clean = df.copy()
        df_clean = self._drop_unused_columns(df_clean)
        df_clean = self._track('missing_country', df_clean, self._drop_missing_country)
        df_clean = self.feature_engineer.generate_features(df_clean)
        df_clean = self._normalise_numeric(df_clean)
        df_clean = self._track('other_categories', df_clean, self._filter_category)
        df_clean = self._track('missing_values', df_clean, self._drop_missing_values)

        self.report['rows_retained'] = len(df_clean)
        logger.info(f"Cleaned data shape: {df_clean.shape}")
        return df_clean

    def _track(self, step: str, df: pd.DataFrame, func) -> pd.DataFrame:
        """Apply a row-removing step and record how many rows it removed."""
        before = len(df)
        df = func(df)
        removed = before - len(df)
        self.report[f'dropped_{step}'] = removed
        logger.info(f"Step '{step}': {before} -> {len(df)} rows ({removed} removed)")
        return df

    def _drop_unused_columns(self, df):
        """Remove identifiers and fields the analysis does not use."""
        present = [col for col in self.config.cleaning.drop_columns if col in df.columns]
        absent = sorted(set(self.config.cleaning.drop_columns) - set(present))
        if absent:
            logger.debug(f"Configured drop columns not in data: {absent}")
        df = df.drop(columns=present)
        logger.info(f"Removed {len(present)} columns. Remaining: {list(df.columns)}")
        return df

    def _drop_missing_country(self, df):
        return df.dropna(subset=[self.columns.country])

    def _normalise_numeric(self, df):
        """Round spending to the nearest whole unit; unparseable amounts and ratings become NaN."""
        amount = self.columns.amount
        rating = self.columns.rating
        df = df.copy()
        df[amount] = pd.to_numeric(df[amount], errors='coerce').round()
        df[rating] = pd.to_numeric(df[rating], errors='coerce')
        return df

    def _filter_category(self, df):
        keep = self.config.cleaning.keep_category
        df = df[df[self.columns.category] == keep]
        logger.info(f"Kept product category '{keep}' only")
        return df

    def _drop_missing_values(self, df):
        df = df.dropna().reset_index(drop=True)
        # safe after the drop: no NaN left in the amount column
        df[self.columns.amount] = df[self.columns.amount].astype('int64')
        return df
