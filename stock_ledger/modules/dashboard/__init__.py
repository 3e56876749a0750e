"""
Dashboard module package exports.
"""

from .controller import DashboardController
from .model import DashboardSummary, DateRange

__all__ = [
    "DashboardController",
    "DashboardSummary",
    "DateRange",
]
