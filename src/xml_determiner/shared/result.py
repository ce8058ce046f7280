"""Result objects for document validation.

A result carries the verdict and timing figures only. It never explains why a
document was rejected; ``error`` is reserved for failures that happen before
the scanner runs, such as an unreadable file.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional


@dataclass
class ValidationMetrics:
    """Performance metrics for one validation."""

    processing_time_ms: float = 0.0
    characters_processed: int = 0

    def __post_init__(self) -> None:
        """Validate metric values."""
        if self.processing_time_ms < 0:
            raise ValueError("processing_time_ms must be >= 0")
        if self.characters_processed < 0:
            raise ValueError("characters_processed must be >= 0")

    @property
    def characters_per_second(self) -> float:
        """Calculate characters processed per second."""
        if self.processing_time_ms <= 0:
            return 0.0
        return (self.characters_processed * 1000.0) / self.processing_time_ms


@dataclass
class ValidationResult:
    """Verdict for a single document candidate."""

    valid: bool
    source: Optional[str] = None
    metrics: ValidationMetrics = field(default_factory=ValidationMetrics)
    error: Optional[str] = None

    def __bool__(self) -> bool:
        return self.valid

    @property
    def verdict(self) -> str:
        """Human readable verdict, ``Valid`` or ``Invalid``."""
        return "Valid" if self.valid else "Invalid"

    def to_dict(self) -> Dict[str, Any]:
        """Convert the result to a JSON-friendly dictionary."""
        data = asdict(self)
        data["metrics"]["characters_per_second"] = self.metrics.characters_per_second
        return data
