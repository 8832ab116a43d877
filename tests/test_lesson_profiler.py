# tests/test_lesson_profiler.py
"""
Unit tests for LessonProfiler class.
"""

from unittest.mock import patch

import psutil

from objectlessons import LessonProfiler, LessonConfig


class TestLessonProfiler:
    """Test lesson profiling functionality."""

    def test_initialization(self):
        """Test profiler initialization."""
        config = LessonConfig()
        profiler = LessonProfiler(config)

        assert profiler.config == config
        assert profiler.lesson_stats == {}
        assert profiler.peak_memory == 0
        assert profiler.profile_count == 0

    def test_snapshot(self):
        """Test process memory snapshot."""
        profiler = LessonProfiler(LessonConfig())

        stats = profiler.snapshot()

        assert "rss" in stats
        assert "vms" in stats
        assert all(v > 0 for v in stats.values())

    def test_snapshot_units(self):
        """Test that snapshot reports MB."""
        profiler = LessonProfiler(LessonConfig())

        with patch.object(psutil.Process, "memory_info") as memory_info:
            memory_info.return_value.rss = 64 * 1024**2
            memory_info.return_value.vms = 128 * 1024**2
            stats = profiler.snapshot()

        assert stats == {"rss": 64.0, "vms": 128.0}

    def test_update_stats(self):
        """Test statistics update."""
        profiler = LessonProfiler(LessonConfig())

        profiler.update_stats("list-of-objects", 1.5, 0.01)
        profiler.update_stats("list-of-objects", 0.5, 0.02)
        profiler.update_stats("tensor-view", 3.0, 0.05)

        stats = profiler.lesson_stats["list-of-objects"]
        assert stats["count"] == 2
        assert stats["total_memory"] == 2.0
        assert stats["peak_memory"] == 1.5
        assert abs(stats["total_time"] - 0.03) < 1e-9
        assert profiler.peak_memory == 3.0
        assert profiler.profile_count == 3

    def test_threshold_from_config(self):
        """Test that the warning limit comes from LessonConfig."""
        profiler = LessonProfiler(LessonConfig(warn_threshold_mb=10.0))

        assert profiler.exceeds_threshold(10.5)
        assert not profiler.exceeds_threshold(10.0)
        assert not LessonProfiler(LessonConfig()).exceeds_threshold(10.5)
