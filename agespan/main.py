"""Composition root for the agespan age calculator.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here, creating a clear entry point for the application.

Module Structure:
- Configuration loading via config module
- Adapter instantiation
- Core service initialization
- Entry point selection (one-shot command or interactive CLI)
"""

import argparse
import json
import logging
import sys
from datetime import date
from typing import Any

from agespan.adapters.cli.commands import OUTPUT_FORMATS, CLICommandHandler, run_command
from agespan.adapters.parsing.iso import IsoDateParser
from agespan.config import Settings, load_settings
from agespan.core.age_service import AgeService
from agespan.core.ports import AgeCalculationPort


def _run_cli_interactive(calculator: AgeCalculationPort, settings: Settings) -> None:
    """Run interactive CLI loop.

    Provides a REPL-like interface for age commands.

    Args:
        calculator: AgeCalculationPort used to execute commands.
        settings: Loaded settings, for default end date and output format.
    """
    logger = logging.getLogger(__name__)
    logger.info("Starting interactive CLI. Type 'help' for available commands or 'exit' to quit.")

    while True:
        try:
            command_line = input("agespan> ").strip()

            if not command_line:
                continue

            if command_line.lower() == "exit":
                logger.info("Exiting CLI")
                break

            if command_line.lower() == "help":
                _print_cli_help()
                continue

            parts = command_line.split(maxsplit=1)
            command = parts[0].lower()
            args_str = parts[1] if len(parts) > 1 else ""

            try:
                args = json.loads(args_str) if args_str else {}
            except json.JSONDecodeError:
                logger.error("Invalid JSON arguments. Use 'help' for command syntax.")
                continue

            if not isinstance(args, dict):
                logger.error("Arguments must be a JSON object. Use 'help' for command syntax.")
                continue

            args.setdefault("end", _default_end_date(settings))
            args.setdefault("format", settings.output_format)

            try:
                result = run_command(calculator, command, args)
                print(json.dumps(result, indent=2))
            except ValueError as e:
                logger.error(f"Command execution error: {e}")
                print(json.dumps({
                    "status": "error",
                    "message": str(e)
                }, indent=2))

        except EOFError:
            # Ctrl+D to exit
            logger.info("EOF received, exiting CLI")
            break


def _print_cli_help() -> None:
    """Print CLI help message."""
    help_text = """
Available Commands (JSON format):

  age
    Years, months, weeks and days between two dates (yyyy-mm-dd).
    Required: start
    Optional: end (defaults to the reference date or today), format (json, text)

    Example: age {"start": "2020-03-15", "end": "2024-07-28"}
    Example: age {"start": "1990-05-15", "format": "text"}

  help
    Show this help message.

  exit
    Exit the CLI.

Note: All commands accept arguments as a single JSON object.
Provide the JSON after the command name on the same line.
    """
    print(help_text)


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Command output goes to stdout, so log records go to stderr.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
        force=True,
    )


def _default_end_date(settings: Settings) -> str:
    """Return the configured reference date, or today in ISO form."""
    return settings.reference_date or date.today().isoformat()


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="agespan",
        description="Age between two dates in years, months, weeks and days.",
    )
    parser.add_argument("start", nargs="?", help="Start date (yyyy-mm-dd)")
    parser.add_argument(
        "end",
        nargs="?",
        help="End date (yyyy-mm-dd); defaults to the reference date or today",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (overrides AGESPAN_OUTPUT_FORMAT)",
    )
    return parser


def _emit(result: dict[str, Any], output_format: str) -> None:
    """Write a command result to stdout."""
    if output_format == "text" and result.get("status") == "success":
        print(result["text"])
    else:
        print(json.dumps(result, indent=2))


def bootstrap(argv: list[str] | None = None) -> int:
    """Load configuration, wire adapters, and run the requested command.

    Steps:
    1. Load configuration from environment
    2. Configure logging
    3. Instantiate adapters and core service
    4. Run a one-shot command or the interactive loop

    Returns:
        Process exit code (0 on success, 1 on invalid input).
    """
    args = build_parser().parse_args(argv)

    # Step 1: Load configuration
    settings = load_settings()

    # Step 2: Configure logging
    log_level = "DEBUG" if settings.debug else settings.log_level
    configure_logging(log_level, settings.log_format)
    logger = logging.getLogger(__name__)

    # Step 3: Wire adapters and core service
    parser = IsoDateParser()
    calculator = AgeService(parser=parser)
    logger.debug("Age service initialized with ISO date parser")

    # Step 4: Run
    if args.start is None:
        _run_cli_interactive(calculator, settings)
        return 0

    output_format = args.output_format or settings.output_format
    end = args.end if args.end is not None else _default_end_date(settings)

    handler = CLICommandHandler(calculator)
    result = handler.calculate_age(args.start, end, output_format)
    _emit(result, output_format)

    return 0 if result["status"] == "success" else 1


def main(argv: list[str] | None = None) -> None:
    """Application entry point.

    Exit codes:
        0: Success
        1: Invalid input or fatal error
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    logger = logging.getLogger(__name__)
    try:
        exit_code = bootstrap(argv)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
