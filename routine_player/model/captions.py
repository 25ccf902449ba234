from dataclasses import dataclass
from typing import Optional, Sequence

from .entities import Pose
from .sequencer import Phase, TransitionPhase


@dataclass(frozen=True)
class PlayerCaption:
    title: str
    subtitle: str
    info: str
    display_pose: Optional[Pose]
    is_transition: bool


def player_caption(poses: Sequence[Pose], phase: Phase, transition_seconds: int) -> PlayerCaption:
    index = phase.index
    current = poses[index] if 0 <= index < len(poses) else None
    upcoming = poses[index + 1] if 0 <= index + 1 < len(poses) else None

    if isinstance(phase, TransitionPhase):
        if upcoming is not None:
            info = f"Up next: {upcoming.name} — {upcoming.duration}s"
        else:
            info = "Get ready to finish strong."
        return PlayerCaption(
            title="Transition",
            subtitle=f"Take {transition_seconds}s to switch poses",
            info=info,
            display_pose=upcoming or current,
            is_transition=True,
        )

    if upcoming is not None:
        info = f"Next: {upcoming.name} — {upcoming.duration}s"
    else:
        info = "This is the last pose."
    return PlayerCaption(
        title=current.name if current is not None else "Pose",
        subtitle="Hold this pose",
        info=info,
        display_pose=current,
        is_transition=False,
    )


def format_total(seconds: int) -> str:
    return f"{seconds}s total"
