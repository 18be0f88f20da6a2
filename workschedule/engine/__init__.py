"""Scheduling engine."""

from .base import BaseScheduler
from .greedy import GreedyScheduler, build_slots
from .orchestrator import build_week_schedule, generate

__all__ = [
    "BaseScheduler",
    "GreedyScheduler",
    "build_slots",
    "build_week_schedule",
    "generate",
]
