"""
Retail Insights Pipeline - Source Package
Config-driven descriptive analysis of retail transactions.
"""

from retail_insights.config import PipelineConfig
from retail_insights.config_loader import ConfigLoader, load_config
from retail_insights.data_cleaning import DataCleaner
from retail_insights.pipeline import build_cleaned_table, run_pipeline

__version__ = "0.1.0"

__all__ = [
    'PipelineConfig',
    'ConfigLoader',
    'load_config',
    'DataCleaner',
    'build_cleaned_table',
    'run_pipeline'
]
