"""External editor support for composing commit messages."""

from __future__ import annotations

import logging
import os

import click

from .errors import UserCancelled
from .message import CommitDraft, MessageParseError, parse_message

logger = logging.getLogger(__name__)

DEFAULT_EDITOR = "vim"

TEMPLATE_FOOTER = (
	"# Please enter the commit message for your changes.\n"
	"# Lines starting with '#' will be ignored, and an empty message aborts the commit."
)


def get_editor(editor: str | None = None) -> str:
	"""Resolve the editor command: explicit value, then $EDITOR, then vim."""
	return editor or os.environ.get("EDITOR") or DEFAULT_EDITOR


def strip_comments(text: str) -> str:
	"""
	Drop comment lines and surrounding blank space from edited text.

	Args:
	        text: Raw editor buffer

	Returns:
	        Message text without '#' lines

	"""
	lines = [line.rstrip() for line in text.splitlines() if not line.lstrip().startswith("#")]
	return "\n".join(lines).strip()


def edit_message(header: str, editor: str | None = None) -> str:
	"""
	Open an editor prefilled with the commit header.

	Args:
	        header: Initial header line, e.g. "feat(api): "
	        editor: Editor command override

	Returns:
	        The edited message with comments removed

	Raises:
	        UserCancelled: If the editor fails or the message is left empty

	"""
	command = get_editor(editor)
	template = f"{header}\n\n{TEMPLATE_FOOTER}\n"
	logger.debug("Opening editor %s", command)

	try:
		edited = click.edit(template, editor=command, extension=".txt", require_save=False)
	except click.ClickException as e:
		logger.debug("Editor failed: %s", e.format_message())
		msg = f"Editor {command!r} exited with an error"
		raise UserCancelled(msg) from e

	message = strip_comments(edited or "")
	if not message:
		msg = "Empty commit message"
		raise UserCancelled(msg)
	return message


def split_edited_message(message: str) -> CommitDraft:
	"""
	Turn an edited message back into a draft.

	Args:
	        message: Edited message whose first line is a conventional header

	Returns:
	        Draft parsed from the message

	Raises:
	        UserCancelled: If the header has no subject or is not conventional

	"""
	try:
		return parse_message(message)
	except MessageParseError as e:
		logger.warning("Edited message is not a conventional commit: %s", e)
		msg = "Commit message header is missing a subject"
		raise UserCancelled(msg) from e
