"""Performance profiler for conversion operations."""

import time
import psutil
import logging
import threading
from collections import deque
from typing import Deque, Dict, Any, Optional
from dataclasses import dataclass
from contextlib import contextmanager


@dataclass
class PerformanceMetrics:
    """Performance metrics for a conversion operation."""
    operation_name: str
    start_time: float
    end_time: float
    duration: float
    input_size: int
    memory_start_mb: float
    memory_end_mb: float


class PerformanceProfiler:
    """
    Records wall-clock duration and process memory for conversions.

    Per-operation state lives in ``profile_operation``'s frame, so one
    profiler can serve concurrent conversions. Only the most recent
    ``max_history`` metrics are kept.
    """

    def __init__(self, logger: Optional[logging.Logger] = None, max_history: int = 1000):
        """
        Initialize the performance profiler.

        Args:
            logger: Optional logger instance
            max_history: Number of recorded operations to keep
        """
        self.logger = logger or logging.getLogger(__name__)
        self.metrics_history: Deque[PerformanceMetrics] = deque(maxlen=max_history)
        self._lock = threading.Lock()

    @contextmanager
    def profile_operation(self, operation_name: str, input_size: int = 0):
        """
        Context manager for profiling operations.

        Args:
            operation_name: Name of the operation being profiled
            input_size: Size of the input (bytes or entry count)
        """
        self.logger.debug(f"Started profiling: {operation_name}")
        start_time = time.time()
        start_memory = self._current_memory_mb()
        try:
            yield self
        finally:
            end_time = time.time()
            metrics = PerformanceMetrics(
                operation_name=operation_name,
                start_time=start_time,
                end_time=end_time,
                duration=end_time - start_time,
                input_size=input_size,
                memory_start_mb=start_memory,
                memory_end_mb=self._current_memory_mb(),
            )
            with self._lock:
                self.metrics_history.append(metrics)

            self.logger.info(f"Performance Summary - {metrics.operation_name}: "
                             f"{metrics.duration * 1000:.2f}ms, "
                             f"memory {metrics.memory_start_mb:.1f} -> {metrics.memory_end_mb:.1f} MB")

    def get_performance_summary(self) -> Dict[str, Any]:
        """
        Get summary of all recorded metrics.

        Returns:
            Dictionary with performance summary
        """
        with self._lock:
            history = list(self.metrics_history)

        if not history:
            return {"total_operations": 0}

        total_duration = sum(m.duration for m in history)
        return {
            "total_operations": len(history),
            "total_duration": total_duration,
            "average_duration": total_duration / len(history),
            "operations": [
                {"name": m.operation_name, "duration": m.duration, "input_size": m.input_size}
                for m in history
            ],
        }

    @staticmethod
    def _current_memory_mb() -> float:
        return psutil.Process().memory_info().rss / 1024 / 1024
