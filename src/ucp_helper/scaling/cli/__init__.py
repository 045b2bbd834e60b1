"""
Scaling Display Tools.

Provides terminal renderings of tier statistics:
- table: per-tier summary table
- chart: level distribution curves
"""

from .chart import ChartSeries, build_chart_data, density_series, format_level_chart
from .table import SummaryRow, build_summary_rows, format_summary_table

__all__ = [
    "ChartSeries",
    "SummaryRow",
    "build_chart_data",
    "build_summary_rows",
    "density_series",
    "format_level_chart",
    "format_summary_table",
]
