"""
Chart rendering for the aggregation tables.
"""

import logging
import os
from typing import Dict, Optional

import matplotlib
matplotlib.use('Agg')  # Non-interactive backend, charts are only written to disk
import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns

from retail_insights.config import ColumnConfig
from retail_insights.features.feature_engineer import GENERATION_COLUMN, QUARTER_COLUMN, REGION_COLUMN

logger = logging.getLogger(__name__)

plt.style.use('seaborn-v0_8')
sns.set_palette("husl")


class GraphGenerator:
    """Writes one PNG chart per aggregation table."""

    def __init__(self, output_dir: str, dpi: int = 150, columns: Optional[ColumnConfig] = None):
        self.output_dir = output_dir
        self.dpi = dpi
        self.columns = columns or ColumnConfig()

    def _save(self, fig, filename: str) -> str:
        os.makedirs(self.output_dir, exist_ok=True)
        path = os.path.join(self.output_dir, filename)
        fig.tight_layout()
        fig.savefig(path, dpi=self.dpi, bbox_inches='tight')
        plt.close(fig)
        logger.info(f"Saved chart: {path}")
        return path

    def _bar(self, table: pd.DataFrame, x: str, y: str, title: str, ylabel: str, filename: str) -> str:
        fig, ax = plt.subplots(figsize=(10, 6))
        sns.barplot(data=table, x=x, y=y, ax=ax)
        ax.set_title(title, fontsize=16, fontweight='bold')
        ax.set_xlabel(x.replace('_', ' '), fontsize=12)
        ax.set_ylabel(ylabel, fontsize=12)
        return self._save(fig, filename)

    def plot_spending_by_segment(self, table: pd.DataFrame) -> str:
        return self._bar(table, self.columns.segment, self.columns.amount,
                         'Total Spending by Customer Segment', 'Total spending',
                         'spending_by_segment.png')

    def plot_rating_by_generation(self, table: pd.DataFrame) -> str:
        return self._bar(table, GENERATION_COLUMN, self.columns.rating,
                         'Average Rating by Generation', 'Mean rating',
                         'rating_by_generation.png')

    def plot_spending_vs_rating(self, table: pd.DataFrame) -> str:
        fig, ax = plt.subplots(figsize=(10, 6))
        sns.scatterplot(data=table, x=self.columns.amount, y=self.columns.rating, alpha=0.6, ax=ax)
        ax.set_title('Spending vs Rating', fontsize=16, fontweight='bold')
        ax.set_xlabel('Total spending', fontsize=12)
        ax.set_ylabel('Rating', fontsize=12)
        return self._save(fig, 'spending_vs_rating.png')

    def plot_spending_by_quarter(self, table: pd.DataFrame) -> str:
        return self._bar(table, QUARTER_COLUMN, self.columns.amount,
                         'Total Spending by Quarter', 'Total spending',
                         'spending_by_quarter.png')

    def plot_rating_by_region(self, table: pd.DataFrame) -> str:
        return self._bar(table, REGION_COLUMN, self.columns.rating,
                         'Average Rating by Region', 'Mean rating',
                         'rating_by_region.png')

    def generate_all(self, aggregations: Dict[str, pd.DataFrame]) -> Dict[str, str]:
        """Render every known aggregation present in ``aggregations``."""
        plotters = {
            'spending_by_segment': self.plot_spending_by_segment,
            'rating_by_generation': self.plot_rating_by_generation,
            'spending_vs_rating': self.plot_spending_vs_rating,
            'spending_by_quarter': self.plot_spending_by_quarter,
            'rating_by_region': self.plot_rating_by_region,
        }
        paths = {}
        for name, table in aggregations.items():
            plot = plotters.get(name)
            if plot is None:
                logger.warning(f"No chart defined for aggregation: {name}")
                continue
            if table.empty:
                logger.warning(f"Skipping chart for empty aggregation: {name}")
                continue
            paths[name] = plot(table)

        logger.info(f"Graph generation completed: {len(paths)} charts")
        return paths
