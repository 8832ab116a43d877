# src/objectlessons/runner.py
"""
LessonRunner: looks up, profiles and runs lessons.
"""

import logging
import time
import warnings
from typing import Any, Dict, Iterable, Optional

from .config import LessonConfig, LessonInfo
from .profiler import LessonProfiler
from .registry import LESSONS, get_lesson


# Set up logging
logger = logging.getLogger(__name__)


class LessonRunner:
    """Runs registered lessons according to a LessonConfig."""

    def __init__(self, config: Optional[LessonConfig] = None):
        self.config = config or LessonConfig()

        # Set up logging based on config
        if self.config.verbose:
            logger.setLevel(logging.INFO)
        else:
            logger.setLevel(logging.WARNING)

        self.profiler = LessonProfiler(self.config)
        self.completed = []

    def run(self, name: str) -> Any:
        """
        Run one lesson and return its observations.

        Errors raised by the lesson (including SystemExit) propagate
        unchanged.
        """
        info = get_lesson(name)
        logger.info(f"→ Running lesson '{info.name}' ({info.topic.value})")

        if not self.config.enable_profiling:
            return self._invoke(info)

        before = self.profiler.snapshot()
        start = time.perf_counter()
        try:
            return self._invoke(info)
        finally:
            elapsed = time.perf_counter() - start
            delta = self.profiler.snapshot()['rss'] - before['rss']
            self.profiler.update_stats(info.name, delta, elapsed)
            logger.info(f"  → {info.name}: {delta:+.2f} MB RSS, {elapsed * 1000:.2f} ms")
            if self.profiler.exceeds_threshold(delta):
                warnings.warn(f"Lesson '{info.name}' grew process memory by {delta:.1f} MB")

    def _invoke(self, info: LessonInfo) -> Any:
        try:
            result = info.func(self.config)
        except BaseException as e:
            logger.info(f"  → {info.name} ended with {type(e).__name__}")
            raise
        self.completed.append(info.name)
        return result

    def run_many(self, names: Iterable[str]) -> Dict[str, Any]:
        """Run lessons in order, printing a header before each one."""
        results = {}
        for name in names:
            print(f"== Running {name} ==")
            results[name] = self.run(name)
        return results

    def run_all(self) -> Dict[str, Any]:
        """Run every registered lesson, skipping terminating ones unless configured."""
        names = []
        for name, info in LESSONS.items():
            if info.terminates and not self.config.include_terminating:
                logger.info(f"Skipping terminating lesson '{name}'")
                continue
            names.append(name)
        return self.run_many(names)

    def get_stats(self) -> Dict[str, Any]:
        """Get lesson statistics."""
        return {
            'completed': list(self.completed),
            'profile_count': self.profiler.profile_count,
            'peak_memory_mb': self.profiler.peak_memory,
            'lesson_stats': dict(self.profiler.lesson_stats),
        }
