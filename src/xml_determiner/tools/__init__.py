"""Developer tools for the XML determiner."""

from .profiling import PerformanceProfiler, PerformanceReport, ProfilingSession

__all__ = [
    "PerformanceProfiler",
    "PerformanceReport",
    "ProfilingSession",
]
