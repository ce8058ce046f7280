"""Validation API with progressive disclosure.

Level 1 is the set of module functions, ``validate_string`` and
``validate_file``. Level 2 is the ``XMLDeterminer`` class holding a
configuration for repeated use. Both wrap the ``determine_xml`` predicate and
never raise for bad input: failures are reported as invalid results.
"""

import time
from pathlib import Path
from typing import Iterable, List, Optional, Union

from xml_determiner.scanning import WHITESPACE, determine_xml
from xml_determiner.shared import (
    ValidationMetrics,
    ValidationResult,
    ValidatorConfig,
    get_logger,
)

PathType = Union[str, Path]

MS_PER_SECOND = 1000


class XMLDeterminer:
    """Reusable validator bound to a configuration.

    Examples:
        >>> determiner = XMLDeterminer()
        >>> determiner.validate("<a><b>text</b></a>").valid
        True
        >>> determiner.validate("<a><b>text</a></b>").verdict
        'Invalid'
    """

    def __init__(self, config: Optional[ValidatorConfig] = None) -> None:
        """Initialize the determiner.

        Args:
            config: Validator configuration, defaults to ``ValidatorConfig()``
        """
        self.config = config or ValidatorConfig.default()
        self.logger = get_logger(__name__, self.config.correlation_id, "determiner")

    def validate(self, text: str, source: Optional[str] = None) -> ValidationResult:
        """Validate a document held in memory.

        Args:
            text: Document candidate
            source: Optional label recorded in the result, such as a file name

        Returns:
            ValidationResult with the verdict
        """
        if self.config.max_input_size_bytes is not None:
            size = len(text.encode(self.config.encoding, errors="replace"))
            if size > self.config.max_input_size_bytes:
                self.logger.warning(
                    "Input exceeds size limit",
                    extra={"size_bytes": size, "limit": self.config.max_input_size_bytes}
                )
                return ValidationResult(
                    valid=False,
                    source=source,
                    error=f"Input of {size} bytes exceeds limit of "
                          f"{self.config.max_input_size_bytes} bytes",
                )

        candidate = text.strip(WHITESPACE) if self.config.trim_input else text

        self.logger.info(
            "Validation started",
            extra={"source": source, "content_length": len(candidate)}
        )

        start_time = time.perf_counter()
        valid = determine_xml(candidate)
        elapsed_ms = (time.perf_counter() - start_time) * MS_PER_SECOND

        metrics = ValidationMetrics()
        if self.config.enable_metrics:
            metrics = ValidationMetrics(
                processing_time_ms=elapsed_ms,
                characters_processed=len(candidate),
            )

        self.logger.info(
            "Validation finished",
            extra={
                "source": source,
                "content_length": len(candidate),
                "valid": valid,
                "processing_time_ms": elapsed_ms,
            }
        )
        return ValidationResult(valid=valid, source=source, metrics=metrics)

    def validate_file(self, file_path: PathType) -> ValidationResult:
        """Validate a document stored in a file.

        The file is decoded with the configured encoding. Read and decode
        failures produce an invalid result with ``error`` set.
        """
        path = Path(file_path)
        try:
            text = path.read_text(encoding=self.config.encoding)
        except (OSError, UnicodeDecodeError) as e:
            self.logger.error(
                "Failed to read file",
                extra={"file": str(path), "reason": str(e)},
                exc_info=False
            )
            return ValidationResult(valid=False, source=str(path), error=str(e))
        return self.validate(text, source=str(path))

    def validate_many(self, file_paths: Iterable[PathType]) -> List[ValidationResult]:
        """Validate several files in order."""
        return [self.validate_file(file_path) for file_path in file_paths]


def validate_string(
    text: str, config: Optional[ValidatorConfig] = None
) -> ValidationResult:
    """Validate a document given as a string.

    Args:
        text: Document candidate
        config: Optional validator configuration

    Returns:
        ValidationResult with the verdict

    Examples:
        >>> validate_string("<message>salary &lt; 1000</message>").valid
        True
        >>> validate_string("<message>salary < 1000</message>").valid
        False
    """
    return XMLDeterminer(config).validate(text)


def validate_file(
    file_path: PathType, config: Optional[ValidatorConfig] = None
) -> ValidationResult:
    """Validate a document stored in a file.

    Args:
        file_path: Path to the file
        config: Optional validator configuration

    Returns:
        ValidationResult with the verdict, or an invalid result carrying
        ``error`` when the file cannot be read
    """
    return XMLDeterminer(config).validate_file(file_path)
