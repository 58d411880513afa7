"""Data models for parsed observations and per-state summaries."""

from pyclimate.models.observation import ObservationRecord
from pyclimate.models.summary import StateSummary

__all__ = [
    "ObservationRecord",
    "StateSummary",
]
