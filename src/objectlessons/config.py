# src/objectlessons/config.py
"""
Configuration and data structures for running lessons.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from .enums import Topic


@dataclass
class LessonConfig:
    """Lesson runner configuration."""
    enable_profiling: bool = False
    include_terminating: bool = False  # run_all() skips lessons that raise or exit
    hard_exit: bool = False  # exit-in-handler uses os._exit instead of sys.exit
    exit_code: int = 0
    resource_path: Optional[str] = None  # File read by with-resource, defaults to its own module
    warn_threshold_mb: float = 256.0  # Warn when one lesson grows RSS by more than this

    # Debug/Verbose mode
    verbose: bool = False  # Enable detailed logging for debugging


@dataclass
class LessonInfo:
    """A registered lesson."""
    name: str
    topic: Topic
    summary: str
    func: Callable[[LessonConfig], Any]
    terminates: bool = False  # Lesson ends by raising or exiting the process
