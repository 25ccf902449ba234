from __future__ import annotations

from pathlib import Path
from typing import Optional

from .catalog import RoutineCatalog, load_routines, sample_routines
from .entities import DEFAULT_TRANSITION_SECONDS
from .settings import AppSettings, SettingsManager, get_settings_path
from .sequencer import Sequencer


class RoutinePlayerModel:
    """Encapsulates the non-UI state for the Routine Player application."""

    def __init__(
        self,
        root_path: Optional[Path] = None,
        *,
        catalog: Optional[RoutineCatalog] = None,
        settings_manager: Optional[SettingsManager] = None,
        transition_seconds: int = DEFAULT_TRANSITION_SECONDS,
    ) -> None:
        if settings_manager is None and root_path is not None:
            settings_manager = SettingsManager(get_settings_path(root_path))
        self.settings: AppSettings = settings_manager.settings if settings_manager else AppSettings()

        self.catalog = catalog if catalog is not None else self._build_catalog(root_path)
        self.sequencer = Sequencer()
        self.transition_seconds = transition_seconds

        initial = self.catalog.get(self.settings.playback.initial_routine) or self.catalog.first()
        self.selected_id: Optional[str] = initial.id if initial is not None else None

    def _build_catalog(self, root_path: Optional[Path]) -> RoutineCatalog:
        routines_file = self.settings.data.routines_file
        if not routines_file:
            return RoutineCatalog(sample_routines())
        path = Path(routines_file)
        if not path.is_absolute() and root_path is not None:
            path = root_path / path
        return RoutineCatalog(load_routines(path))
