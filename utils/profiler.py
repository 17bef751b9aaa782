"""
A simple context manager for code profiling.

This utility measures the execution time of a block of code, such as one
fuzzify, evaluate and defuzzify cycle of a controller.
"""
import time
import logging

profiler_log = logging.getLogger('profiler')

class CodeProfiler:
    """
    A context manager to time the execution of a code block.

    Example:
        with CodeProfiler("Tip Cycle"):
            # code to time goes here

    Attributes:
        name (str): The name of the code block being timed.
        latency_ms (float): Warn when the block takes longer than this.
        start_time (float): The time when the block was entered.
        elapsed_ms (float): The measured time, set on exit.
    """
    def __init__(self, name="", latency_ms=10.0):
        self.name = name
        self.latency_ms = latency_ms
        self.elapsed_ms = None

    def __enter__(self):
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.elapsed_ms = (time.perf_counter() - self.start_time) * 1000
        profiler_log.info("'%s' execution time: %.3f ms", self.name, self.elapsed_ms)
        if self.elapsed_ms > self.latency_ms:
            profiler_log.warning(
                "'%s' exceeded %.1fms latency limit.", self.name, self.latency_ms
            )
