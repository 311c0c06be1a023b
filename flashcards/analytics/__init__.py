"""
Analytics package exports.
"""

from flashcards.analytics.service import build_progress_dashboard
from flashcards.analytics.types import ProgressDashboardData

__all__ = [
    "build_progress_dashboard",
    "ProgressDashboardData",
]
