"""Process resource monitoring for ETL runs."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from datetime import timedelta

import psutil

logger = logging.getLogger(__name__)

_MB = 1024 * 1024


@dataclass(frozen=True)
class SystemStats:
    """A snapshot of the current process's resource usage."""

    cpu_usage: float
    memory_usage_mb: int
    memory_usage_percent: float
    peak_memory_mb: int
    elapsed_time: timedelta


def _format_elapsed(elapsed: timedelta) -> str:
    return f"{elapsed.total_seconds():.3f}s"


class SystemMonitor:
    """Samples CPU and memory use of the running process when enabled."""

    def __init__(self, enabled: bool = False) -> None:
        self.enabled = enabled
        self._process = psutil.Process()
        # Prime the CPU counter so the first real sample is meaningful.
        self._process.cpu_percent(None)
        self._start = time.monotonic()
        self._peak_memory_mb = 0
        self._lock = threading.Lock()

    def get_stats(self) -> SystemStats | None:
        """Return current usage, or None when disabled or unavailable."""
        if not self.enabled:
            return None
        try:
            with self._process.oneshot():
                cpu = self._process.cpu_percent(None)
                rss = self._process.memory_info().rss
            total = psutil.virtual_memory().total
        except psutil.Error:
            return None

        memory_mb = rss // _MB
        total_mb = total // _MB
        percent = memory_mb / total_mb * 100.0 if total_mb > 0 else 0.0

        with self._lock:
            self._peak_memory_mb = max(self._peak_memory_mb, memory_mb)
            peak = self._peak_memory_mb

        return SystemStats(
            cpu_usage=cpu,
            memory_usage_mb=memory_mb,
            memory_usage_percent=percent,
            peak_memory_mb=peak,
            elapsed_time=timedelta(seconds=time.monotonic() - self._start),
        )

    def log_stats(self, phase: str) -> None:
        """Log a usage line for the given phase."""
        stats = self.get_stats()
        if stats is None:
            return
        logger.info(
            "📊 %s - CPU: %.1f%%, Memory: %dMB (%.1f%%), Peak: %dMB, Time: %s",
            phase,
            stats.cpu_usage,
            stats.memory_usage_mb,
            stats.memory_usage_percent,
            stats.peak_memory_mb,
            _format_elapsed(stats.elapsed_time),
        )

    def log_final_stats(self) -> None:
        """Log the total elapsed time and peak memory."""
        stats = self.get_stats()
        if stats is None:
            return
        logger.info(
            "📊 Final Stats - Total Time: %s, Peak Memory: %dMB",
            _format_elapsed(stats.elapsed_time),
            stats.peak_memory_mb,
        )