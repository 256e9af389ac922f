# ============================================================================
# src/medical_grounding/utils/metrics.py
# ============================================================================
"""
Performance metrics tracking for the medical grounding library.

Counters are observability only; nothing in extraction or grounding reads
them back.
"""

import time
import threading
from typing import Dict, List, Optional, Any
from collections import defaultdict
import statistics


class MetricsCollector:
    """Collect and aggregate metrics. Safe to share across worker threads."""

    def __init__(self):
        self._lock = threading.Lock()
        self._counters: Dict[str, int] = defaultdict(int)
        self._histograms: Dict[str, List[float]] = defaultdict(list)
        self._timers: Dict[str, List[float]] = defaultdict(list)

    def increment(self, name: str, value: int = 1) -> None:
        """
        Increment counter.

        Args:
            name: Counter name
            value: Increment amount
        """
        with self._lock:
            self._counters[name] += value

    def record_value(self, name: str, value: float) -> None:
        """
        Record value in histogram.

        Args:
            name: Histogram name
            value: Value to record
        """
        with self._lock:
            self._histograms[name].append(value)

    def record_time(self, name: str, duration: float) -> None:
        """
        Record operation duration.

        Args:
            name: Operation name
            duration: Duration in seconds
        """
        with self._lock:
            self._timers[name].append(duration)

    def get_counter(self, name: str) -> int:
        """Get counter value."""
        return self._counters.get(name, 0)

    @staticmethod
    def _stats(values: List[float]) -> Optional[Dict[str, float]]:
        if not values:
            return None

        sorted_values = sorted(values)
        count = len(values)

        return {
            'count': count,
            'min': sorted_values[0],
            'max': sorted_values[-1],
            'mean': statistics.mean(values),
            'median': statistics.median(values),
            'p95': sorted_values[min(int(count * 0.95), count - 1)],
        }

    def get_histogram_stats(self, name: str) -> Optional[Dict[str, float]]:
        """
        Get histogram statistics.

        Returns:
            Dict with count, min, max, mean, median, p95
        """
        with self._lock:
            values = list(self._histograms.get(name, []))
        return self._stats(values)

    def get_timer_stats(self, name: str) -> Optional[Dict[str, float]]:
        """Get timer statistics."""
        with self._lock:
            values = list(self._timers.get(name, []))
        return self._stats(values)

    def get_all_metrics(self) -> Dict[str, Any]:
        """Get all metrics."""
        with self._lock:
            histogram_names = list(self._histograms.keys())
            timer_names = list(self._timers.keys())
            counters = dict(self._counters)

        return {
            'counters': counters,
            'histograms': {
                name: self.get_histogram_stats(name)
                for name in histogram_names
            },
            'timers': {
                name: self.get_timer_stats(name)
                for name in timer_names
            }
        }

    def reset(self) -> None:
        """Reset all metrics."""
        with self._lock:
            self._counters.clear()
            self._histograms.clear()
            self._timers.clear()


class Timer:
    """Context manager for timing operations."""

    def __init__(self, collector: Optional[MetricsCollector], operation: str):
        self.collector = collector
        self.operation = operation
        self.start_time: Optional[float] = None
        self.duration: Optional[float] = None

    def __enter__(self):
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration = time.perf_counter() - self.start_time
        if self.collector is not None:
            self.collector.record_time(self.operation, self.duration)


# Global metrics instance
_global_metrics = MetricsCollector()


def _enabled() -> bool:
    from ..config import logging_settings
    return logging_settings.ENABLE_METRICS


def get_metrics() -> MetricsCollector:
    """Get global metrics collector."""
    return _global_metrics


def increment(name: str, value: int = 1) -> None:
    """Increment global counter."""
    if _enabled():
        _global_metrics.increment(name, value)


def record_value(name: str, value: float) -> None:
    """Record value in global histogram."""
    if _enabled():
        _global_metrics.record_value(name, value)


def time_operation(operation: str) -> Timer:
    """Create timer for operation using global metrics."""
    return Timer(_global_metrics if _enabled() else None, operation)
