from dataclasses import dataclass, field
from typing import List, Optional

MIN_DURATION = 5
MIN_TRANSITION = 5
DEFAULT_TRANSITION_SECONDS = 10
DURATION_STEP = 5


@dataclass
class Pose:
    id: str
    name: str
    duration: int
    image: Optional[str] = None

    def adjust(self, delta: int) -> int:
        self.duration = max(MIN_DURATION, self.duration + delta)
        return self.duration


@dataclass
class Routine:
    id: str
    name: str
    description: str = ""
    poses: List[Pose] = field(default_factory=list)

    @property
    def first_duration(self) -> int:
        return self.poses[0].duration if self.poses else 0

    def find_pose(self, pose_id: str) -> Optional[Pose]:
        for pose in self.poses:
            if pose.id == pose_id:
                return pose
        return None
