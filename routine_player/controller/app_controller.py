from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, List, Optional

from ..model.app_model import RoutinePlayerModel
from ..model.captions import PlayerCaption, player_caption
from ..model.entities import MIN_TRANSITION, Pose, Routine
from ..model.sequencer import Phase, PhaseKind, PlaybackState, Sequencer, total_routine_seconds
from ..model.settings import AppSettings


class RoutinePlayerController:
    """Command and query surface between the view and the routine model.

    Every command returns ``True`` when it changed state and ``False`` when it
    was ignored; none of them raise. Listeners registered with
    :meth:`add_listener` are notified after each change so the view can
    re-render.
    """

    def __init__(
        self,
        root_path: Optional[Path] = None,
        *,
        model: Optional[RoutinePlayerModel] = None,
    ) -> None:
        self._model = model if model is not None else RoutinePlayerModel(root_path)
        self._log = logging.getLogger(__name__)
        self._listeners: List[Callable[[], None]] = []
        self._sync_idle()

    def add_listener(self, callback: Callable[[], None]) -> None:
        self._listeners.append(callback)

    def remove_listener(self, callback: Callable[[], None]) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    # ------------------------------------------------------------------
    # Convenience accessors
    # ------------------------------------------------------------------
    @property
    def settings(self) -> AppSettings:
        return self._model.settings

    @property
    def routines(self) -> List[Routine]:
        return self._model.catalog.routines

    @property
    def selected_routine(self) -> Optional[Routine]:
        if self._model.selected_id is None:
            return None
        return self._model.catalog.get(self._model.selected_id) or self._model.catalog.first()

    @property
    def transition_seconds(self) -> int:
        return self._model.transition_seconds

    @property
    def state(self) -> PlaybackState:
        return self._sequencer.state

    @property
    def _sequencer(self) -> Sequencer:
        return self._model.sequencer

    def _poses(self) -> List[Pose]:
        routine = self.selected_routine
        return routine.poses if routine is not None else []

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def current_phase(self) -> Phase:
        return self.state.phase

    def current_phase_kind(self) -> PhaseKind:
        return self.state.phase.kind

    def current_pose_index(self) -> int:
        return self.state.current_index

    def remaining_seconds(self) -> int:
        return self.state.remaining

    def is_paused(self) -> bool:
        return self.state.paused

    def is_playing(self) -> bool:
        return self.state.playing

    def should_tick(self) -> bool:
        return self.state.playing and not self.state.paused

    def total_routine_seconds(self) -> int:
        return total_routine_seconds(self._poses(), self.transition_seconds)

    def caption(self) -> PlayerCaption:
        return player_caption(self._poses(), self.state.phase, self.transition_seconds)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def select_routine(self, routine_id: str) -> bool:
        if self.state.playing:
            self._log.debug("PlaybackController: ignoring select routine=%s while playing", routine_id)
            return False
        if self._model.catalog.get(routine_id) is None:
            self._log.debug("PlaybackController: unknown routine=%s", routine_id)
            return False
        self._model.selected_id = routine_id
        self._sync_idle()
        self._log.debug("PlaybackController: selected routine=%s", routine_id)
        self._notify()
        return True

    def start(self) -> bool:
        routine = self.selected_routine
        if routine is None or not self._sequencer.start(routine.poses):
            self._log.debug("PlaybackController: start ignored, routine has no poses")
            return False
        self._log.debug("PlaybackController: start routine=%s poses=%s", routine.id, len(routine.poses))
        self._notify()
        return True

    def toggle_pause(self) -> bool:
        if not self._sequencer.toggle_pause():
            return False
        self._log.debug("PlaybackController: paused=%s remaining=%s", self.state.paused, self.state.remaining)
        self._notify()
        return True

    def reset(self) -> bool:
        self._sequencer.reset(self._poses())
        self._log.debug("PlaybackController: reset")
        self._notify()
        return True

    def exit(self) -> bool:
        self._sequencer.exit(self._poses())
        self._log.debug("PlaybackController: exit")
        self._notify()
        return True

    def adjust_pose_duration(self, pose_id: str, delta: int) -> bool:
        if not self._model.catalog.adjust_duration(pose_id, delta):
            self._log.debug("PlaybackController: pose duration unchanged pose=%s delta=%s", pose_id, delta)
            return False
        # A live pose hold keeps counting from its old value; only idle mirrors pose 0.
        if not self.state.playing and self.state.current_index == 0:
            self._sync_idle()
        self._log.debug("PlaybackController: pose=%s delta=%s", pose_id, delta)
        self._notify()
        return True

    def adjust_transition(self, delta: int) -> bool:
        previous = self._model.transition_seconds
        updated = max(MIN_TRANSITION, previous + delta)
        self._model.transition_seconds = updated
        snapped = self._sequencer.retarget_transition(updated)
        if updated == previous and not snapped:
            return False
        self._log.debug("PlaybackController: transition=%s snapped=%s", updated, snapped)
        self._notify()
        return True

    # ------------------------------------------------------------------
    # Tick ingress
    # ------------------------------------------------------------------
    def on_tick(self) -> bool:
        if not self._sequencer.advance(self._poses(), self.transition_seconds):
            return False
        if not self.state.playing:
            self._log.debug("PlaybackController: routine finished")
            self._sync_idle()
        self._notify()
        return True

    def _sync_idle(self) -> None:
        # Idle always mirrors the first pose of the selected routine.
        if self.state.playing:
            return
        routine = self.selected_routine
        self._sequencer.rewind(routine.first_duration if routine is not None else 0)

    def _notify(self) -> None:
        for callback in list(self._listeners):
            callback()
