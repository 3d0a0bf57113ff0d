"""Commit draft model and conventional commit message formatting."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .types import CommitType

HEADER_PATTERN = re.compile(r"^(?P<type>[A-Za-z]+)(?:\((?P<scope>[^()]*)\))?: (?P<subject>.+)$")

# Characters that would break the header or end it early
SCOPE_FORBIDDEN_CHARS = frozenset("()\r\n")


class DraftError(AssertionError):
	"""Raised when an incomplete draft reaches the formatter."""


class MissingTypeError(DraftError):
	"""Raised when a draft has no commit type."""


class EmptySubjectError(DraftError):
	"""Raised when a draft has a blank subject line."""


class InvalidScopeError(DraftError):
	"""Raised when a scope cannot appear inside the header parentheses."""


class MessageParseError(ValueError):
	"""Raised when a message is not a conventional commit message."""


@dataclass
class CommitDraft:
	"""In-progress commit message collected across prompt stages."""

	commit_type: CommitType | None = None
	scope: str = ""
	subject: str = ""
	body: str = ""


def is_valid_scope(scope: str) -> bool:
	"""Whether the scope can be written as ``type(scope)``."""
	return not SCOPE_FORBIDDEN_CHARS.intersection(scope)


def format_header(commit_type: CommitType, scope: str, subject: str) -> str:
	"""Build the ``type(scope): subject`` line, dropping the scope when blank."""
	scope = scope.strip()
	if scope:
		return f"{commit_type.label}({scope}): {subject.strip()}"
	return f"{commit_type.label}: {subject.strip()}"


def compose_message(draft: CommitDraft) -> str:
	"""
	Format a draft as a conventional commit message.

	The header is ``type(scope): subject``; the scope segment and its
	parentheses are left out when the scope is empty. A non-empty body
	follows the header after one blank line.

	Args:
	        draft: Draft to format

	Returns:
	        The finished commit message

	Raises:
	        MissingTypeError: If the draft has no commit type
	        EmptySubjectError: If the subject is blank
	        InvalidScopeError: If the scope contains parentheses or a line break

	"""
	if draft.commit_type is None:
		msg = "Cannot compose a commit message without a commit type"
		raise MissingTypeError(msg)
	if not draft.subject.strip():
		msg = "Cannot compose a commit message with an empty subject"
		raise EmptySubjectError(msg)
	if not is_valid_scope(draft.scope.strip()):
		msg = f"Scope {draft.scope!r} cannot contain parentheses or line breaks"
		raise InvalidScopeError(msg)

	header = format_header(draft.commit_type, draft.scope, draft.subject)
	body = draft.body.strip()
	if body:
		return f"{header}\n\n{body}"
	return header


def parse_message(message: str) -> CommitDraft:
	"""
	Parse a conventional commit message back into a draft.

	Args:
	        message: Message in the form produced by compose_message

	Returns:
	        CommitDraft with type, scope, subject and body filled in

	Raises:
	        MessageParseError: If the header is malformed or the type is unknown

	"""
	header, _, body = message.strip().partition("\n")
	match = HEADER_PATTERN.match(header.strip())
	if match is None:
		msg = f"Not a conventional commit header: {header!r}"
		raise MessageParseError(msg)

	try:
		commit_type = CommitType.from_label(match.group("type"))
	except ValueError as e:
		raise MessageParseError(str(e)) from e

	return CommitDraft(
		commit_type=commit_type,
		scope=(match.group("scope") or "").strip(),
		subject=match.group("subject").strip(),
		body=body.strip(),
	)
