"""Countdown state machine that walks a routine pose by pose.

A routine of ``N`` poses is played as ``N`` hold intervals separated by
``N - 1`` transition intervals. Time advances only through :meth:`Sequencer.advance`,
one whole second per call.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Sequence, Union

from .entities import Pose


class PhaseKind(Enum):
    POSE = "POSE"
    TRANSITION = "TRANSITION"


@dataclass(frozen=True)
class PosePhase:
    """Holding the pose at ``index``."""

    index: int
    kind: ClassVar[PhaseKind] = PhaseKind.POSE


@dataclass(frozen=True)
class TransitionPhase:
    """Moving from the pose at ``index`` to the one after it."""

    index: int
    kind: ClassVar[PhaseKind] = PhaseKind.TRANSITION

    @property
    def next_index(self) -> int:
        return self.index + 1


Phase = Union[PosePhase, TransitionPhase]


@dataclass
class PlaybackState:
    phase: Phase = field(default_factory=lambda: PosePhase(0))
    remaining: int = 0
    paused: bool = False
    playing: bool = False

    @property
    def current_index(self) -> int:
        return self.phase.index


def total_routine_seconds(poses: Sequence[Pose], transition_seconds: int) -> int:
    if not poses:
        return 0
    hold_total = sum(pose.duration for pose in poses)
    return hold_total + max(len(poses) - 1, 0) * transition_seconds


class Sequencer:
    def __init__(self) -> None:
        self.state = PlaybackState()

    def rewind(self, first_duration: int) -> None:
        self.state.phase = PosePhase(0)
        self.state.paused = False
        self.state.remaining = first_duration

    def start(self, poses: Sequence[Pose]) -> bool:
        if not poses:
            return False
        self.state.playing = True
        self.rewind(poses[0].duration)
        return True

    def reset(self, poses: Sequence[Pose]) -> None:
        self.rewind(poses[0].duration if poses else 0)

    def exit(self, poses: Sequence[Pose]) -> None:
        self.state.playing = False
        self.rewind(poses[0].duration if poses else 0)

    def toggle_pause(self) -> bool:
        if not self.state.playing:
            return False
        self.state.paused = not self.state.paused
        return True

    def retarget_transition(self, transition_seconds: int) -> bool:
        # An in-flight transition restarts its countdown at the new length.
        if self.state.playing and isinstance(self.state.phase, TransitionPhase):
            self.state.remaining = transition_seconds
            return True
        return False

    def advance(self, poses: Sequence[Pose], transition_seconds: int) -> bool:
        """Consume one tick. Returns ``False`` when idle or paused."""
        state = self.state
        if not state.playing or state.paused:
            return False

        if state.remaining > 1:
            state.remaining -= 1
            return True

        phase = state.phase
        if isinstance(phase, PosePhase):
            if phase.index + 1 < len(poses):
                state.phase = TransitionPhase(phase.index)
                state.remaining = transition_seconds
            else:
                self._finish()
            return True

        next_index = phase.next_index
        if next_index < len(poses):
            state.phase = PosePhase(next_index)
            state.remaining = poses[next_index].duration
        else:
            self._finish()
        return True

    def _finish(self) -> None:
        self.state.playing = False
        self.state.remaining = 0
