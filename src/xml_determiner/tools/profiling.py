"""Performance profiling tools for document validation.

Records duration, input size and resident memory around each validation and
aggregates the sessions into a report.
"""

import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import psutil

from xml_determiner.api import XMLDeterminer
from xml_determiner.shared import ValidatorConfig
from xml_determiner.shared.logging import get_logger


@dataclass
class ProfilingSession:
    """Measurements of a single profiled validation."""

    session_id: str
    start_time: float
    end_time: float
    input_size: int  # encoded bytes
    valid: bool
    memory_start: int = 0  # bytes
    memory_end: int = 0  # bytes
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def total_duration_ms(self) -> float:
        """Total session duration in milliseconds."""
        return (self.end_time - self.start_time) * 1000

    @property
    def memory_delta(self) -> int:
        """Memory usage change in bytes."""
        return self.memory_end - self.memory_start

    @property
    def throughput_mb_per_s(self) -> float:
        """Processing throughput in MB/s."""
        duration_s = self.end_time - self.start_time
        if duration_s <= 0:
            return 0.0
        return (self.input_size / (1024 * 1024)) / duration_s

    def to_dict(self) -> Dict[str, Any]:
        return {
            "session_id": self.session_id,
            "valid": self.valid,
            "input_size": self.input_size,
            "duration_ms": self.total_duration_ms,
            "throughput_mb_per_s": self.throughput_mb_per_s,
            "memory_delta_bytes": self.memory_delta,
            "metadata": dict(self.metadata),
        }


@dataclass
class PerformanceReport:
    """Aggregate of profiling sessions."""

    sessions: List[ProfilingSession]
    generation_time: float

    @property
    def session_count(self) -> int:
        """Total number of profiled sessions."""
        return len(self.sessions)

    @property
    def average_duration_ms(self) -> float:
        """Average validation duration across sessions."""
        if not self.sessions:
            return 0.0
        return sum(s.total_duration_ms for s in self.sessions) / len(self.sessions)

    @property
    def average_throughput_mb_per_s(self) -> float:
        """Average throughput across sessions."""
        if not self.sessions:
            return 0.0
        return sum(s.throughput_mb_per_s for s in self.sessions) / len(self.sessions)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "generation_time": self.generation_time,
            "session_count": self.session_count,
            "average_duration_ms": self.average_duration_ms,
            "average_throughput_mb_per_s": self.average_throughput_mb_per_s,
            "sessions": [session.to_dict() for session in self.sessions],
        }


class PerformanceProfiler:
    """Profiler for validation runs.

    Examples:
        >>> profiler = PerformanceProfiler()
        >>> session = profiler.profile("<a></a>", "small")
        >>> session.valid
        True
        >>> profiler.generate_report().session_count
        1
    """

    def __init__(
        self,
        config: Optional[ValidatorConfig] = None,
        enable_memory_tracking: bool = True
    ) -> None:
        """Initialize performance profiler.

        Args:
            config: Validator configuration used for every profiled run
            enable_memory_tracking: Whether to sample resident memory
        """
        self.determiner = XMLDeterminer(config)
        self.enable_memory_tracking = enable_memory_tracking
        self.sessions: List[ProfilingSession] = []
        self.logger = get_logger(__name__, None, "performance_profiler")
        self._process = psutil.Process() if enable_memory_tracking else None

    def _memory_usage(self) -> int:
        if self._process is None:
            return 0
        return self._process.memory_info().rss

    def profile(self, text: str, session_id: str) -> ProfilingSession:
        """Validate ``text`` and record a profiling session for it."""
        memory_start = self._memory_usage()
        start_time = time.perf_counter()
        result = self.determiner.validate(text, source=session_id)
        end_time = time.perf_counter()
        memory_end = self._memory_usage()

        session = ProfilingSession(
            session_id=session_id,
            start_time=start_time,
            end_time=end_time,
            input_size=len(text.encode(self.determiner.config.encoding, errors="replace")),
            valid=result.valid,
            memory_start=memory_start,
            memory_end=memory_end,
        )
        if result.error:
            session.metadata["error"] = result.error
        self.sessions.append(session)

        self.logger.debug(
            "Profiling session recorded",
            extra={
                "session_id": session_id,
                "duration_ms": session.total_duration_ms,
                "memory_delta": session.memory_delta,
            }
        )
        return session

    def generate_report(self) -> PerformanceReport:
        """Build a report over every recorded session."""
        return PerformanceReport(sessions=list(self.sessions), generation_time=time.time())

    def reset(self) -> None:
        """Discard recorded sessions."""
        self.sessions.clear()
