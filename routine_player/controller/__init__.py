"""Controller layer mediating between the view and the routine model."""

from .app_controller import RoutinePlayerController

__all__ = ["RoutinePlayerController"]
