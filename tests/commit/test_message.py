"""Tests for commit message composition and parsing."""

from __future__ import annotations

import pytest

from gcz.commit.message import (
	CommitDraft,
	DraftError,
	EmptySubjectError,
	InvalidScopeError,
	MessageParseError,
	MissingTypeError,
	compose_message,
	is_valid_scope,
	parse_message,
)
from gcz.commit.types import CommitType


@pytest.mark.unit
class TestComposeMessage:
	"""Test cases for compose_message."""

	def test_type_scope_subject(self) -> None:
		"""Scope is wrapped in parentheses and there is no body block."""
		draft = CommitDraft(CommitType.FEAT, scope="api", subject="add login", body="")
		assert compose_message(draft) == "feat(api): add login"

	def test_empty_scope_drops_parentheses(self) -> None:
		"""A blank scope leaves out the whole scope segment."""
		draft = CommitDraft(CommitType.CHORE, scope="", subject="update deps")
		assert compose_message(draft) == "chore: update deps"

	def test_whitespace_scope_counts_as_empty(self) -> None:
		"""Whitespace-only scopes are treated as missing."""
		draft = CommitDraft(CommitType.DOCS, scope="   ", subject="fix typo")
		assert compose_message(draft) == "docs: fix typo"

	def test_body_after_blank_line(self) -> None:
		"""A body is separated from the header by one blank line."""
		draft = CommitDraft(
			CommitType.FIX,
			scope="parser",
			subject="handle empty input",
			body="Empty files used to crash the tokenizer.\n\nCloses #12",
		)
		assert compose_message(draft) == (
			"fix(parser): handle empty input\n\nEmpty files used to crash the tokenizer.\n\nCloses #12"
		)

	def test_surrounding_whitespace_is_trimmed(self) -> None:
		"""Leading and trailing space is removed from each part."""
		draft = CommitDraft(CommitType.PERF, scope=" db ", subject="  cache lookups ", body="\n\nbody\n")
		assert compose_message(draft) == "perf(db): cache lookups\n\nbody"

	def test_missing_type(self) -> None:
		"""A draft without a type is a caller bug."""
		with pytest.raises(MissingTypeError):
			compose_message(CommitDraft(subject="something"))

	@pytest.mark.parametrize("subject", ["", "   ", "\n"])
	def test_empty_subject(self, subject: str) -> None:
		"""A blank subject is a caller bug."""
		with pytest.raises(EmptySubjectError):
			compose_message(CommitDraft(CommitType.TEST, subject=subject))

	def test_draft_errors_are_assertions(self) -> None:
		"""Draft errors surface as assertion failures."""
		assert issubclass(MissingTypeError, DraftError)
		assert issubclass(EmptySubjectError, DraftError)
		assert issubclass(InvalidScopeError, DraftError)
		assert issubclass(DraftError, AssertionError)

	@pytest.mark.parametrize("scope", ["a(b)", "api)", "(core", "api\nfix"])
	def test_scope_that_breaks_header(self, scope: str) -> None:
		"""Scopes with parentheses or line breaks would not parse back."""
		with pytest.raises(InvalidScopeError):
			compose_message(CommitDraft(CommitType.FEAT, scope=scope, subject="x"))

	def test_is_valid_scope(self) -> None:
		"""Only parentheses and line breaks are refused."""
		assert is_valid_scope("api-v2/auth")
		assert is_valid_scope("")
		assert not is_valid_scope("a(b)")
		assert not is_valid_scope("one\rtwo")


@pytest.mark.unit
class TestParseMessage:
	"""Test cases for parse_message."""

	@pytest.mark.parametrize(
		"draft",
		[
			CommitDraft(CommitType.FEAT, scope="api", subject="add login", body="Adds the /login route."),
			CommitDraft(CommitType.REFACTOR, scope="core", subject="split module", body="one\n\ntwo"),
			CommitDraft(CommitType.STYLE, scope="", subject="reformat", body=""),
			CommitDraft(CommitType.CI, scope="api-v2/auth", subject="use (new) runner", body=""),
		],
	)
	def test_round_trip(self, draft: CommitDraft) -> None:
		"""Parsing a composed message gives back the draft."""
		assert parse_message(compose_message(draft)) == draft

	def test_parses_header_only(self) -> None:
		"""A header without scope or body parses to empty strings."""
		draft = parse_message("ci: run on tags")
		assert draft.commit_type is CommitType.CI
		assert draft.scope == ""
		assert draft.subject == "run on tags"
		assert draft.body == ""

	@pytest.mark.parametrize(
		"message",
		[
			"add login",
			"feat add login",
			"feat(api) add login",
			"feat: ",
			"",
		],
	)
	def test_malformed_header(self, message: str) -> None:
		"""Headers that do not follow the convention are rejected."""
		with pytest.raises(MessageParseError):
			parse_message(message)

	def test_unknown_type(self) -> None:
		"""Types outside the closed set are rejected."""
		with pytest.raises(MessageParseError, match="Unknown commit type"):
			parse_message("build: bump version")
