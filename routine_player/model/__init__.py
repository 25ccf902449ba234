"""Model layer containing the application's core logic and data structures."""

from .app_model import RoutinePlayerModel
from .captions import PlayerCaption, format_total, player_caption
from .catalog import RoutineCatalog, load_routines, sample_routines
from .entities import (
    DEFAULT_TRANSITION_SECONDS,
    DURATION_STEP,
    MIN_DURATION,
    MIN_TRANSITION,
    Pose,
    Routine,
)
from .sequencer import (
    Phase,
    PhaseKind,
    PlaybackState,
    PosePhase,
    Sequencer,
    TransitionPhase,
    total_routine_seconds,
)
from .settings import (
    AppSettings,
    DataSettings,
    GeneralSettings,
    PlaybackSettings,
    SettingsManager,
    get_settings_path,
)

__all__ = [
    "AppSettings",
    "DEFAULT_TRANSITION_SECONDS",
    "DURATION_STEP",
    "DataSettings",
    "GeneralSettings",
    "MIN_DURATION",
    "MIN_TRANSITION",
    "Phase",
    "PhaseKind",
    "PlaybackSettings",
    "PlaybackState",
    "PlayerCaption",
    "Pose",
    "PosePhase",
    "Routine",
    "RoutineCatalog",
    "RoutinePlayerModel",
    "Sequencer",
    "SettingsManager",
    "TransitionPhase",
    "format_total",
    "get_settings_path",
    "load_routines",
    "player_caption",
    "sample_routines",
    "total_routine_seconds",
]
