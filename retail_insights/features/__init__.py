"""
Feature engineering package for derived categorical columns.
"""

from retail_insights.features.feature_engineer import FeatureEngineer, map_region, map_generation, map_quarter

__all__ = ['FeatureEngineer', 'map_region', 'map_generation', 'map_quarter']
