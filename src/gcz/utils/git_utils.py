"""Git utilities for gcz."""

from __future__ import annotations

import logging
import subprocess
from typing import TYPE_CHECKING

if TYPE_CHECKING:
	from pathlib import Path

logger = logging.getLogger(__name__)


class GitError(Exception):
	"""Custom exception for Git-related errors."""


def run_git_command(command: list[str], cwd: Path | None = None) -> str:
	"""
	Run a Git command and return its output.

	Args:
	        command: Git command to run
	        cwd: Working directory (optional)

	Returns:
	        Command output as string

	Raises:
	        GitError: If the command fails or git is not installed

	"""
	try:
		result = subprocess.run(  # noqa: S603
			command,
			cwd=cwd,
			capture_output=True,
			text=True,
			check=True,
		)
	except FileNotFoundError as e:
		msg = "git executable not found"
		raise GitError(msg) from e
	except subprocess.CalledProcessError as e:
		error_msg = f"Git command failed: {' '.join(command)}\nError: {e.stderr}"
		logger.debug(error_msg)
		raise GitError(error_msg) from e
	else:
		return result.stdout


def is_inside_work_tree(cwd: Path | None = None) -> bool:
	"""
	Check whether the directory is inside a Git working tree.

	Args:
	        cwd: Directory to check (defaults to the current directory)

	Returns:
	        True if inside a working tree, False otherwise

	"""
	try:
		output = run_git_command(["git", "rev-parse", "--is-inside-work-tree"], cwd)
	except GitError:
		return False
	return output.strip() == "true"


def has_staged_changes(cwd: Path | None = None) -> bool:
	"""
	Check whether anything is staged for commit.

	Args:
	        cwd: Repository directory (optional)

	Returns:
	        True if the index differs from HEAD

	Raises:
	        GitError: If the staged file list cannot be read

	"""
	try:
		staged = run_git_command(["git", "diff", "--cached", "--name-only"], cwd)
	except GitError as e:
		msg = "Failed to check for staged changes"
		raise GitError(msg) from e
	return bool(staged.strip())


def commit(message: str, cwd: Path | None = None) -> None:
	"""
	Create a commit from the staged changes.

	Args:
	        message: Commit message
	        cwd: Repository directory (optional)

	Raises:
	        GitError: If the commit fails

	"""
	try:
		run_git_command(["git", "commit", "-m", message], cwd)
	except GitError as e:
		msg = f"Failed to create commit: {e}"
		raise GitError(msg) from e
	logger.info("Committed: %s", message.splitlines()[0])
