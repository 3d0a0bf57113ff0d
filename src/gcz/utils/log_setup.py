"""Logging setup for gcz."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.rule import Rule
from rich.text import Text

console = Console(stderr=True)


def setup_logging(is_verbose: bool = False) -> None:
	"""
	Set up logging configuration.

	Args:
	        is_verbose: Enable debug logging

	"""
	log_level = logging.DEBUG if is_verbose else logging.WARNING

	root_logger = logging.getLogger()
	root_logger.setLevel(log_level)

	# Clear existing handlers to avoid duplicate logs if called multiple times
	for handler in root_logger.handlers[:]:
		root_logger.removeHandler(handler)

	console_handler = RichHandler(
		level=log_level,
		console=console,
		rich_tracebacks=True,
		show_time=is_verbose,
		show_path=is_verbose,
	)
	root_logger.addHandler(console_handler)


def _display_summary(title: str, message: str, style: str) -> None:
	console.print()
	console.print(Rule(Text(title, style=f"bold {style}"), style=style))
	console.print(f"\n{message}\n")
	console.print(Rule(style=style))
	console.print()


def display_error_summary(error_message: str) -> None:
	"""
	Display an error summary with a divider and a title.

	Args:
	        error_message: The error message to display

	"""
	_display_summary("Error Summary", error_message, "red")


def display_warning_summary(warning_message: str) -> None:
	"""
	Display a warning summary with a divider and a title.

	Args:
	        warning_message: The warning message to display

	"""
	_display_summary("Warning Summary", warning_message, "yellow")
