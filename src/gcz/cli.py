"""Command-line interface for gcz."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from gcz import __version__
from gcz.commit.errors import UserCancelled
from gcz.commit.interactive import CommitPrompter
from gcz.commit.message import DraftError
from gcz.config import DEFAULT_CONFIG
from gcz.utils.cli_utils import exit_with_error, handle_keyboard_interrupt, show_warning
from gcz.utils.config_loader import ConfigError, ConfigLoader
from gcz.utils.git_utils import GitError, commit, has_staged_changes, is_inside_work_tree
from gcz.utils.log_setup import setup_logging

logger = logging.getLogger(__name__)
console = Console()

EDITOR_HELP = """
Editor configuration:

The editor used by --editor is taken from commit.editor in the config file,
then the $EDITOR environment variable, and falls back to vim.
"""

app = typer.Typer(
	add_completion=False,
	context_settings={"help_option_names": ["-h", "--help"]},
)

# --- Option Annotations ---

EmojiFlag = Annotated[bool, typer.Option("--emoji", "-e", help="Show the type emoji in the selection list")]

EditorFlag = Annotated[
	bool, typer.Option("--editor", "-E", help="Write the subject and body in an external editor")
]

DryRunFlag = Annotated[
	bool, typer.Option("--dry-run", "-n", help="Print the commit message instead of committing")
]

ConfigOpt = Annotated[
	Path | None,
	typer.Option("--config", "-c", help="Path to config file"),
]

VerboseFlag = Annotated[bool, typer.Option("--verbose", "-v", help="Enable verbose logging")]


def _version_callback(value: bool) -> None:
	"""Callback for --version option."""
	if value:
		typer.echo(f"gcz version: {__version__}")
		raise typer.Exit


VersionFlag = Annotated[
	bool | None,
	typer.Option("--version", help="Show version and exit.", callback=_version_callback, is_eager=True),
]


def _load_config(config_path: Path | None) -> ConfigLoader:
	"""Load configuration, exiting with the default failure code if it is invalid."""
	try:
		return ConfigLoader.get_instance(config_file=str(config_path) if config_path else None, reload=True)
	except ConfigError as e:
		exit_with_error("Invalid configuration.", exit_code=DEFAULT_CONFIG["exit_codes"]["failure"], exception=e)


def _check_repository(failure_code: int) -> bool:
	"""
	Make sure there is something to commit.

	Args:
	        failure_code: Exit code used when the repository cannot be used

	Returns:
	        False when there are no staged changes, True otherwise

	"""
	if not is_inside_work_tree():
		exit_with_error("Not a git repository.", exit_code=failure_code)

	try:
		staged = has_staged_changes()
	except GitError as e:
		exit_with_error("Could not read the git index.", exit_code=failure_code, exception=e)

	if not staged:
		show_warning("No staged changes. Stage files with 'git add' first.")
	return staged


@app.command(epilog=EDITOR_HELP)
def gcz(
	emoji: EmojiFlag = False,
	use_editor: EditorFlag = False,
	dry_run: DryRunFlag = False,
	config_path: ConfigOpt = None,
	is_verbose: VerboseFlag = False,
	_version: VersionFlag = None,
) -> None:
	"""Select a commit type, describe the change and commit it."""
	setup_logging(is_verbose=is_verbose)

	config = _load_config(config_path)
	failure_code = config.get_exit_code("failure")
	cancelled_code = config.get_exit_code("cancelled")

	if not dry_run and not _check_repository(failure_code):
		return

	prompter = CommitPrompter(
		with_emoji=emoji or config.get("commit.use_emoji", False),
		use_editor=use_editor or config.get("commit.use_editor", False),
		editor=config.get("commit.editor"),
	)

	try:
		message = prompter.compose()
	except (UserCancelled, KeyboardInterrupt) as e:
		logger.debug("Cancelled: %s", e)
		handle_keyboard_interrupt(cancelled_code)
	except DraftError as e:
		logger.exception("Commit draft was incomplete after prompting")
		exit_with_error("Internal error while composing the commit message.", exit_code=failure_code, exception=e)

	if dry_run:
		typer.echo(message)
		return

	try:
		commit(message)
	except GitError as e:
		exit_with_error("Commit failed.", exit_code=failure_code, exception=e)

	console.print(f"[green]✓[/green] Committed: {message.splitlines()[0]}")


def main() -> None:
	"""Run the CLI application."""
	app()


if __name__ == "__main__":
	sys.exit(main())
