"""
Output helpers for the retail insights pipeline.
"""

import logging
import os
from typing import Any, Dict

import pandas as pd
import yaml

logger = logging.getLogger(__name__)


def _ensure_parent_dir(path: str):
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)


def _to_native(value: Any) -> Any:
    """Convert numpy scalars to plain Python values so PyYAML can dump them."""
    if hasattr(value, 'item'):
        return value.item()
    return value


def preview_table(df: pd.DataFrame, n_rows: int = 5) -> str:
    """Return the first rows of a table formatted for the console."""
    return df.head(n_rows).to_string()


def save_cleaned_data(df: pd.DataFrame, output_path: str):
    """Save cleaned data to file."""
    _ensure_parent_dir(output_path)
    df.to_csv(output_path, index=False)
    logger.info(f"Cleaned data saved to: {output_path}")


def save_summary(aggregations: Dict[str, pd.DataFrame], report: Dict[str, int], output_path: str):
    """Write the aggregation tables and the cleaning report to a YAML file."""
    summary = {
        'cleaning_report': {key: _to_native(value) for key, value in report.items()},
        'aggregations': {},
    }
    for name, table in aggregations.items():
        if name == 'spending_vs_rating':
            # pairwise rows are not a summary; record their count only
            summary['aggregations'][name] = {'pairs': len(table)}
            continue
        summary['aggregations'][name] = [
            {col: _to_native(val) for col, val in record.items()}
            for record in table.to_dict(orient='records')
        ]

    _ensure_parent_dir(output_path)
    with open(output_path, 'w') as f:
        yaml.safe_dump(summary, f, default_flow_style=False, sort_keys=False)

    logger.info(f"Summary saved to: {output_path}")
