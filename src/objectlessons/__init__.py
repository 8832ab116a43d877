# src/objectlessons/__init__.py
"""
objectlessons: small programs that demonstrate object semantics
Aliasing, copying, class vs. instance storage, identity vs. equality,
finally and process exit, and attribute lookup under inheritance
"""

__version__ = "0.1.0"

from .enums import Topic
from .config import LessonConfig, LessonInfo
from .models import Employee, House, SharedNameDog, InstanceNameDog, TrickDog, Animal, Dog
from .profiler import LessonProfiler
from .registry import LESSONS, get_lesson, lesson_names
from .runner import LessonRunner

__all__ = [
    "LessonRunner",
    "LessonConfig",
    "LessonInfo",
    "LessonProfiler",
    "Topic",
    "LESSONS",
    "get_lesson",
    "lesson_names",
    "Employee",
    "House",
    "SharedNameDog",
    "InstanceNameDog",
    "TrickDog",
    "Animal",
    "Dog",
]
