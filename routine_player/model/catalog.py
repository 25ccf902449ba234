from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, List, Optional, Tuple

from .entities import MIN_DURATION, Pose, Routine

_log = logging.getLogger(__name__)


def sample_routines() -> List[Routine]:
    """Return a fresh copy of the built-in routines."""
    return [
        Routine(
            id="lower-back",
            name="Lower Back",
            description="Stretches and gentle twists for lower back relief.",
            poses=[
                Pose("lb-1", "Child's Pose", 30, "poses/child-pose.jpg"),
                Pose("lb-2", "Cat-Cow", 40, "poses/cat-cow.jpg"),
                Pose("lb-3", "Knees-to-Chest", 30, "poses/knees-chest.jpg"),
            ],
        ),
        Routine(
            id="shoulder",
            name="Shoulder",
            description="Open up tight shoulders and upper back.",
            poses=[
                Pose("s-1", "Shoulder Rolls", 20, "poses/shoulder-rolls.jpg"),
                Pose("s-2", "Eagle Arms", 30, "poses/eagle-arms.jpg"),
                Pose("s-3", "Thread the Needle", 40, "poses/thread-needle.jpg"),
            ],
        ),
        Routine(
            id="neck",
            name="Neck",
            description="Gentle neck stretches to ease tension.",
            poses=[
                Pose("n-1", "Neck Tilt", 15, "poses/neck-tilt.jpg"),
                Pose("n-2", "Neck Turn", 15, "poses/neck-turn.jpg"),
                Pose("n-3", "Chin Tuck", 20, "poses/chin-tuck.jpg"),
            ],
        ),
    ]


def _parse_pose(data: Any) -> Optional[Pose]:
    if not isinstance(data, dict):
        _log.warning("Skipping pose entry %r: not an object.", data)
        return None
    pose_id = data.get("id")
    name = data.get("name")
    if not isinstance(pose_id, str) or not isinstance(name, str):
        _log.warning("Skipping pose entry %r: id and name are required.", data)
        return None
    duration = data.get("duration", MIN_DURATION)
    if isinstance(duration, bool) or not isinstance(duration, int):
        _log.warning("Invalid duration %r for pose %s; using %s.", duration, pose_id, MIN_DURATION)
        duration = MIN_DURATION
    elif duration < MIN_DURATION:
        _log.warning("Duration %s for pose %s below minimum; clamping to %s.", duration, pose_id, MIN_DURATION)
        duration = MIN_DURATION
    image = data.get("image")
    return Pose(pose_id, name, duration, image if isinstance(image, str) else None)


def _parse_routine(data: Any) -> Optional[Routine]:
    if not isinstance(data, dict):
        _log.warning("Skipping routine entry %r: not an object.", data)
        return None
    routine_id = data.get("id")
    name = data.get("name")
    if not isinstance(routine_id, str) or not isinstance(name, str):
        _log.warning("Skipping routine entry %r: id and name are required.", data)
        return None
    raw_poses = data.get("poses", [])
    if not isinstance(raw_poses, list):
        _log.warning("Routine %s has no pose list; treating it as empty.", routine_id)
        raw_poses = []
    poses = [pose for pose in (_parse_pose(item) for item in raw_poses) if pose is not None]
    description = data.get("description", "")
    return Routine(routine_id, name, description if isinstance(description, str) else "", poses)


def load_routines(path: Path) -> List[Routine]:
    """Read routines from a JSON file, falling back to the built-in set."""
    try:
        data = json.loads(path.read_text())
    except (json.JSONDecodeError, OSError) as exc:
        _log.warning("Unable to read routines from %s (%s); using built-in routines.", path, exc)
        return sample_routines()
    if not isinstance(data, list):
        _log.warning("Routines file %s must contain a list; using built-in routines.", path)
        return sample_routines()
    routines = [routine for routine in (_parse_routine(item) for item in data) if routine is not None]
    if not routines:
        _log.warning("Routines file %s contained no usable routines; using built-in routines.", path)
        return sample_routines()
    return routines


class RoutineCatalog:
    """Ordered set of routines whose pose durations can be adjusted."""

    def __init__(self, routines: Optional[Iterable[Routine]] = None) -> None:
        self._routines: List[Routine] = list(routines) if routines is not None else sample_routines()

    @property
    def routines(self) -> List[Routine]:
        return list(self._routines)

    def __len__(self) -> int:
        return len(self._routines)

    def get(self, routine_id: str) -> Optional[Routine]:
        for routine in self._routines:
            if routine.id == routine_id:
                return routine
        return None

    def first(self) -> Optional[Routine]:
        return self._routines[0] if self._routines else None

    def locate_pose(self, pose_id: str) -> Optional[Tuple[Routine, Pose]]:
        for routine in self._routines:
            pose = routine.find_pose(pose_id)
            if pose is not None:
                return routine, pose
        return None

    def adjust_duration(self, pose_id: str, delta: int) -> bool:
        # Every pose carrying the id is adjusted, including repeats loaded from a file.
        changed = False
        for routine in self._routines:
            for pose in routine.poses:
                if pose.id != pose_id:
                    continue
                previous = pose.duration
                if pose.adjust(delta) != previous:
                    changed = True
        return changed
