"""Stateful side of the calendar: event stores and the daily runner."""

from .store import EventSink, MemoryCalendarStore
from .runner import DailyRunner

__all__ = [
    "EventSink",
    "MemoryCalendarStore",
    "DailyRunner",
]
