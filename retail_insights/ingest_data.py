"""
Data ingestion module for loading raw transaction data.
"""

import logging
import os
from typing import Iterable

import pandas as pd

logger = logging.getLogger(__name__)


class SchemaError(ValueError):
    """Raised when the source file does not carry the expected header."""


def load_transactions(file_path: str) -> pd.DataFrame:
    """
    Load every row of a comma-separated transaction file into memory.

    Args:
        file_path: Path to the CSV file.
    Returns:
        pd.DataFrame: The raw table with the file's column names.
    Raises:
        FileNotFoundError: If the file does not exist or cannot be read.
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"Source data file not found: {file_path}")

    logger.info(f"Loading data from {file_path}")
    try:
        df = pd.read_csv(file_path)
    except (OSError, pd.errors.EmptyDataError) as e:
        raise FileNotFoundError(f"Cannot read source data file: {file_path} ({e})") from e
    logger.info(f"Loaded {len(df)} rows and {len(df.columns)} columns")
    return df


def validate_columns(df: pd.DataFrame, required: Iterable[str]) -> None:
    """Check that every required column is present (exact, case-sensitive match)."""
    missing = [col for col in required if col not in df.columns]
    if missing:
        raise SchemaError(f"CSV is missing required columns: {missing}. Found: {list(df.columns)}")
