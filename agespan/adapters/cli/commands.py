"""CLI command implementations for agespan.

Provides human-initiated age calculations through the command-line interface.

This adapter maps CLI commands (age) to AgeCalculationPort operations.
It handles CLI-specific formatting and error reporting.
"""

import logging
from typing import Any

from agespan.core.models import AgeResult, InvalidDateError
from agespan.core.ports import AgeCalculationPort

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("json", "text")


class CLICommandHandler:
    """Handles CLI commands by delegating to AgeCalculationPort."""

    def __init__(self, calculator: AgeCalculationPort):
        """Initialize the CLI command handler.

        Args:
            calculator: AgeCalculationPort implementation to execute commands.
        """
        self.calculator = calculator

    def calculate_age(
        self, start: str, end: str, output_format: str = "json"
    ) -> dict[str, Any]:
        """Compute the age between two ISO dates via CLI.

        Args:
            start: Start date in yyyy-mm-dd form.
            end: End date in yyyy-mm-dd form.
            output_format: Output format ('json', 'text'). Default 'json'.

        Returns:
            Dictionary with status and result, or status/message on error.
        """
        if output_format not in OUTPUT_FORMATS:
            return {
                "status": "error",
                "operation": "age",
                "message": f"Unsupported format: {output_format}",
            }

        try:
            age = self.calculator.calculate_from_strings(start, end)
        except InvalidDateError as e:
            logger.error(f"Failed to calculate age: {e}")
            return {
                "status": "error",
                "operation": "age",
                "message": str(e),
            }

        result: dict[str, Any] = {
            "status": "success",
            "operation": "age",
            "start": start.strip(),
            "end": end.strip(),
            "result": age.as_dict(),
        }

        if output_format == "text":
            result["text"] = self.format_text(age)

        return result

    @staticmethod
    def format_text(age: AgeResult) -> str:
        """Format an age as compact text, e.g. ``1y 2m 3w 4d``."""
        return f"{age.years}y {age.months}m {age.weeks}w {age.days}d"


def run_command(
    calculator: AgeCalculationPort,
    command: str,
    args: dict[str, Any],
) -> dict[str, Any]:
    """Run a CLI command.

    Entry point for executing CLI commands. Maps command names to handler methods.

    Args:
        calculator: AgeCalculationPort implementation.
        command: Command name ('age').
        args: Dictionary of command arguments.

    Returns:
        Dictionary with command result.

    Raises:
        ValueError: If command is not recognized or arguments are missing.
    """
    handler = CLICommandHandler(calculator)

    if command == "age":
        for name in ("start", "end"):
            if name not in args:
                raise ValueError(f"Missing required parameter: {name}")
        return handler.calculate_age(
            args["start"],
            args["end"],
            args.get("format", "json"),
        )

    raise ValueError(f"Unknown command: {command}")
