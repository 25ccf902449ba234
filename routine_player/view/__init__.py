"""GUI components for the Routine Player application."""

from .main_window import RoutinePlayerWindow
from .ticker import PlaybackTicker

__all__ = ["RoutinePlayerWindow", "PlaybackTicker"]
