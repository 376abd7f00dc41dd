"""Application removal: planning, process handling and deletion."""

from macrm.removal.engine import RemovalEngine, RemovalWorker
from macrm.removal.planner import build_plan
from macrm.removal.process import is_running, request_quit

__all__ = [
    "RemovalEngine",
    "RemovalWorker",
    "build_plan",
    "is_running",
    "request_quit",
]
