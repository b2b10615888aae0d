"""
Visualization module for rendering aggregation charts.
"""

from .graph_generator import GraphGenerator

__all__ = ["GraphGenerator"]
