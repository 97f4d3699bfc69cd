from .profile import Profile
from .water import WaterIntake
from .sunlight import SunlightSession
from .meditation import MeditationSession
from .sleep import SleepRecord
from .activity import PhysicalActivity
from .task import PRIORITY_MAX, PRIORITY_MIN, TaskItem

__all__ = [
    "Profile",
    "WaterIntake",
    "SunlightSession",
    "MeditationSession",
    "SleepRecord",
    "PhysicalActivity",
    "TaskItem",
    "PRIORITY_MIN",
    "PRIORITY_MAX",
]
