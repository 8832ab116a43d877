# src/objectlessons/profiler.py
"""
Process memory and timing statistics per lesson.
"""

import psutil
import threading
from typing import Dict

from .config import LessonConfig


class LessonProfiler:
    """Memory profiling and statistics collection."""

    def __init__(self, config: LessonConfig):
        self.config = config
        self.lesson_stats = {}
        self.peak_memory = 0
        self.profile_count = 0
        self._process = psutil.Process()
        self._lock = threading.Lock()

    def snapshot(self) -> Dict[str, float]:
        """Current process memory usage in MB."""
        info = self._process.memory_info()
        return {
            'rss': info.rss / 1024**2,
            'vms': info.vms / 1024**2,
        }

    def update_stats(self, lesson_name: str, memory_delta: float, elapsed: float):
        """Update statistics for a lesson."""
        with self._lock:
            if lesson_name not in self.lesson_stats:
                self.lesson_stats[lesson_name] = {
                    'count': 0,
                    'total_memory': 0,
                    'peak_memory': 0,
                    'total_time': 0.0
                }

            stats = self.lesson_stats[lesson_name]
            stats['count'] += 1
            stats['total_memory'] += memory_delta
            stats['peak_memory'] = max(stats['peak_memory'], memory_delta)
            stats['total_time'] += elapsed

            self.peak_memory = max(self.peak_memory, memory_delta)
            self.profile_count += 1

    def exceeds_threshold(self, memory_delta: float) -> bool:
        """True when a lesson grew process memory by more than the configured limit."""
        return memory_delta > self.config.warn_threshold_mb
