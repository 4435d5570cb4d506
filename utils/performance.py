# utils/performance.py
from __future__ import annotations
import time
import logging
import psutil
from typing import Callable, Iterator
from functools import wraps
from contextlib import contextmanager

logger = logging.getLogger(__name__)

class PerformanceMonitor:
    """Log timing and memory deltas for analysis calls"""

    def __init__(self):
        self.process = psutil.Process()

    @contextmanager
    def monitor_operation(self, operation_name: str, event_count: int = 0):
        """Context manager to monitor performance of operations"""
        start_time = time.perf_counter()
        start_memory = self.process.memory_info().rss / 1024 / 1024  # MB

        try:
            yield
        finally:
            execution_time = time.perf_counter() - start_time
            memory_usage = self.process.memory_info().rss / 1024 / 1024 - start_memory
            throughput = event_count / execution_time if execution_time > 0 else 0

            logger.debug(f"[PERF] {operation_name}: {execution_time:.4f}s, "
                         f"{throughput:.0f} events/sec, {memory_usage:.1f}MB")

def performance_timer(func: Callable) -> Callable:
    """Decorator to time function execution"""
    @wraps(func)
    def wrapper(*args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        logger.debug(f"[TIMER] {func.__name__}: {time.perf_counter() - start:.3f}s")
        return result
    return wrapper

class MemoryOptimizer:
    """Helpers for reading large log files"""

    @staticmethod
    def stream_file_lines(file_path: str, chunk_size: int = 8192) -> Iterator[str]:
        """Stream file lines to avoid holding the raw text and the parsed rows at once"""
        with open(file_path, 'r', encoding='utf-8', errors='replace') as f:
            buffer = ""
            while True:
                chunk = f.read(chunk_size)
                if not chunk:
                    if buffer:
                        yield buffer
                    break

                buffer += chunk
                lines = buffer.split('\n')
                buffer = lines[-1]  # Keep incomplete line in buffer

                for line in lines[:-1]:
                    yield line

    @staticmethod
    def memory_usage_mb() -> float:
        """Get current memory usage in MB"""
        return psutil.Process().memory_info().rss / 1024 / 1024

# Global instances
performance_monitor = PerformanceMonitor()
