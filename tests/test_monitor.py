import logging
from datetime import timedelta

import pytest

from smalletl.monitor import SystemMonitor


@pytest.fixture
def monitor_caplog(caplog):
    caplog.set_level(logging.INFO, logger="smalletl.monitor")
    return caplog


def test_disabled_by_default():
    monitor = SystemMonitor()
    assert monitor.enabled is False
    assert monitor.get_stats() is None


def test_enabled_stats_are_consistent():
    monitor = SystemMonitor(True)
    stats = monitor.get_stats()
    assert stats.peak_memory_mb >= stats.memory_usage_mb
    assert 0.0 <= stats.memory_usage_percent <= 100.0
    assert stats.elapsed_time >= timedelta(0)
    assert stats.cpu_usage >= 0.0


def test_peak_and_elapsed_never_decrease():
    monitor = SystemMonitor(True)
    first = monitor.get_stats()
    second = monitor.get_stats()
    assert second.peak_memory_mb >= first.peak_memory_mb
    assert second.elapsed_time >= first.elapsed_time


def test_log_stats_names_phase(monitor_caplog):
    monitor = SystemMonitor(True)
    monitor.log_stats("Extract")
    messages = [r.getMessage() for r in monitor_caplog.records]
    assert len(messages) == 1
    assert "Extract - CPU:" in messages[0]
    stats = monitor.get_stats()
    assert stats.peak_memory_mb >= stats.memory_usage_mb


def test_log_final_stats(monitor_caplog):
    monitor = SystemMonitor(True)
    monitor.log_final_stats()
    messages = [r.getMessage() for r in monitor_caplog.records]
    assert len(messages) == 1
    assert "Final Stats - Total Time:" in messages[0]
    stats = monitor.get_stats()
    assert stats.elapsed_time >= timedelta(0)


def test_disabled_monitor_logs_nothing(monitor_caplog):
    monitor = SystemMonitor(False)
    monitor.log_stats("Extract")
    monitor.log_final_stats()
    assert monitor_caplog.records == []
    assert monitor.get_stats() is None