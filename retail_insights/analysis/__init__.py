"""
Analysis module for descriptive aggregations.

This module groups the cleaned table by segment, generation, quarter and region.
"""

from .aggregations import (
    spending_by_segment,
    rating_by_generation,
    spending_vs_rating,
    spending_by_quarter,
    rating_by_region,
    run_all_aggregations,
)

__all__ = [
    "spending_by_segment",
    "rating_by_generation",
    "spending_vs_rating",
    "spending_by_quarter",
    "rating_by_region",
    "run_all_aggregations"
]
