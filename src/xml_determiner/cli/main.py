"""Main CLI entry point for the xml-determiner command-line tool.

Provides checking of a document passed on the command line, validation of
files, and profiling of validation runs.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from xml_determiner import __version__
from xml_determiner.api import XMLDeterminer
from xml_determiner.shared.config import ConfigError, ValidatorConfig
from xml_determiner.shared.result import ValidationResult
from xml_determiner.tools.profiling import PerformanceProfiler

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_INTERRUPTED = 130


class CLIConfig:
    """Configuration management for CLI operations."""

    def __init__(self) -> None:
        self.validator_config = ValidatorConfig.default()
        self.output_format = "text"

    @classmethod
    def from_file(cls, config_path: Path) -> "CLIConfig":
        """Load CLI configuration from a JSON file.

        Recognized keys are ``preset`` (``default`` or ``strict``),
        ``output_format`` and ``encoding``. An unreadable or invalid file
        leaves the defaults in place.
        """
        config = cls()
        if not config_path.exists():
            return config
        try:
            with config_path.open() as f:
                data = json.load(f)
            if data.get("preset") == "strict":
                config.validator_config = ValidatorConfig.strict()
            if "encoding" in data:
                config.validator_config = config.validator_config.override(
                    encoding=data["encoding"]
                )
            config.output_format = data.get("output_format", config.output_format)
        except (OSError, ValueError, AttributeError, ConfigError) as e:
            print(f"Warning: Could not load config file: {e}", file=sys.stderr)
            return cls()
        return config


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="xml-determiner",
        description="Determine whether documents are well-formed restricted XML"
    )

    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Quiet output"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Check command
    check_parser = subparsers.add_parser("check", help="Check a document given as text")
    check_parser.add_argument(
        "text",
        nargs="?",
        default="",
        help="Document to check (empty when omitted)"
    )
    check_parser.add_argument(
        "--strict",
        action="store_true",
        help="Do not trim surrounding whitespace before checking"
    )

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Validate document files")
    validate_parser.add_argument(
        "paths",
        nargs="+",
        type=Path,
        help="Files to validate"
    )
    validate_parser.add_argument(
        "--format", "-f",
        choices=["json", "text"],
        help="Output format (default: text)"
    )
    validate_parser.add_argument(
        "--encoding", "-e",
        help="File encoding (default: utf-8)"
    )
    validate_parser.add_argument(
        "--strict",
        action="store_true",
        help="Do not trim surrounding whitespace before checking"
    )
    validate_parser.add_argument(
        "--config", "-c",
        type=Path,
        help="Configuration file path"
    )

    # Profile command
    profile_parser = subparsers.add_parser("profile", help="Profile validation of files")
    profile_parser.add_argument(
        "paths",
        nargs="+",
        type=Path,
        help="Files to profile"
    )
    profile_parser.add_argument(
        "--no-memory",
        action="store_true",
        help="Disable memory tracking"
    )

    return parser


def format_results(results: List[ValidationResult], format_type: str) -> str:
    """Format validation results for output."""
    if format_type == "json":
        return json.dumps([result.to_dict() for result in results], indent=2)

    lines = []
    for result in results:
        line = f"{result.verdict}: {result.source}"
        if result.error:
            line += f" ({result.error})"
        lines.append(line)
    return "\n".join(lines)


def cmd_check(args: argparse.Namespace) -> int:
    """Handle check command."""
    config = ValidatorConfig.strict() if args.strict else ValidatorConfig.default()
    result = XMLDeterminer(config).validate(args.text)
    print(result.verdict)
    return EXIT_VALID if result.valid else EXIT_INVALID


def cmd_validate(args: argparse.Namespace) -> int:
    """Handle validate command."""
    cli_config = CLIConfig()
    if args.config:
        cli_config = CLIConfig.from_file(args.config)

    overrides: Dict[str, Any] = {}
    if args.strict:
        overrides["trim_input"] = False
    if args.encoding:
        overrides["encoding"] = args.encoding
    try:
        validator_config = cli_config.validator_config.override(**overrides)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID

    results = XMLDeterminer(validator_config).validate_many(args.paths)
    print(format_results(results, args.format or cli_config.output_format))

    return EXIT_VALID if all(result.valid for result in results) else EXIT_INVALID


def cmd_profile(args: argparse.Namespace) -> int:
    """Handle profile command."""
    profiler = PerformanceProfiler(enable_memory_tracking=not args.no_memory)

    for path in args.paths:
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            print(f"Skipping {path}: {e}", file=sys.stderr)
            continue
        profiler.profile(text, str(path))

    report = profiler.generate_report()
    print(json.dumps(report.to_dict(), indent=2))
    return EXIT_VALID if report.session_count else EXIT_INVALID


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_INVALID

    # Set up logging verbosity
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    elif args.quiet:
        logging.basicConfig(level=logging.ERROR)

    try:
        if args.command == "check":
            return cmd_check(args)
        elif args.command == "validate":
            return cmd_validate(args)
        elif args.command == "profile":
            return cmd_profile(args)
        else:
            print(f"Unknown command: {args.command}", file=sys.stderr)
            return EXIT_INVALID

    except KeyboardInterrupt:
        print("\nOperation interrupted by user", file=sys.stderr)
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
