"""
Utils package for output helpers.
"""

from retail_insights.utils.data_loader import preview_table, save_cleaned_data, save_summary

__all__ = [
    'preview_table',
    'save_cleaned_data',
    'save_summary'
]
