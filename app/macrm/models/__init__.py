"""Data models for macrm.

This module exports the core data structures used throughout the application.
"""

from macrm.models.bundle import ApplicationBundle, ResidualEntry
from macrm.models.removal import (
    ProgressEvent,
    ProgressKind,
    RemovalOutcome,
    RemovalPlan,
    RemovalState,
)

__all__ = [
    "ApplicationBundle",
    "ProgressEvent",
    "ProgressKind",
    "RemovalOutcome",
    "RemovalPlan",
    "RemovalState",
    "ResidualEntry",
]
