"""Liftlog core: session resolution, personal records and training analytics."""

from app.liftlog.analytics import AnalyticsConfig, compute_training_stats
from app.liftlog.resolver import SessionResolver, WeekSelection

__all__ = ["AnalyticsConfig", "compute_training_stats", "SessionResolver", "WeekSelection"]
