"""Utility functions for CLI operations in gcz."""

from __future__ import annotations

import logging
from typing import NoReturn

import typer
from rich.console import Console

from gcz.utils.log_setup import display_error_summary, display_warning_summary

console = Console()
logger = logging.getLogger(__name__)

# Standard exit code for SIGINT
DEFAULT_CANCELLED_EXIT_CODE = 130


def show_error(message: str, exception: Exception | None = None) -> None:
	"""
	Display an error summary with standardized formatting.

	Args:
	        message: The error message to display
	        exception: Optional exception that caused the error

	"""
	error_text = message
	if exception:
		error_text += f"\n\nDetails: {exception!s}"
		logger.debug("Error occurred", exc_info=exception)

	display_error_summary(error_text)


def show_warning(message: str) -> None:
	"""
	Display a warning summary with standardized formatting.

	Args:
	        message: The warning message to display

	"""
	display_warning_summary(message)


def exit_with_error(message: str, exit_code: int = 1, exception: Exception | None = None) -> NoReturn:
	"""
	Display an error message and exit.

	Args:
	        message: Error message to display
	        exit_code: Exit code to use
	        exception: Optional exception that caused the error

	"""
	show_error(message, exception)
	raise typer.Exit(exit_code) from exception


def handle_keyboard_interrupt(exit_code: int = DEFAULT_CANCELLED_EXIT_CODE) -> NoReturn:
	"""
	Print a cancellation notice and exit without a traceback.

	Args:
	        exit_code: Exit code reported to the shell

	"""
	console.print("\n[yellow]Commit cancelled by user.[/yellow]")
	raise typer.Exit(exit_code)
