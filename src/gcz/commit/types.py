"""Conventional commit types and keyword filtering."""

from __future__ import annotations

from enum import Enum


class CommitType(Enum):
	"""
	Closed set of conventional commit types.

	Member order is the canonical display order and is preserved by
	filtering.

	"""

	FEAT = ("feat", "✨", "A new feature")
	FIX = ("fix", "🐛", "A bug fix")
	DOCS = ("docs", "📚", "Documentation only changes")
	STYLE = ("style", "💎", "Formatting, white-space, missing semi-colons")
	REFACTOR = ("refactor", "♻️", "A code change that neither fixes a bug nor adds a feature")
	PERF = ("perf", "⚡", "A code change that improves performance")
	TEST = ("test", "🧪", "Adding missing tests or correcting existing tests")
	CI = ("ci", "👷", "Changes to CI configuration files and scripts")
	CHORE = ("chore", "🔧", "Other changes that don't modify src or test files")

	def __init__(self, label: str, emoji: str, description: str) -> None:
		"""
		Unpack the member tuple.

		Args:
		        label: Type name as it appears in the commit header
		        emoji: Emoji shown next to the label when requested
		        description: One-line explanation shown in the type list

		"""
		self.label = label
		self.emoji = emoji
		self.description = description

	def __str__(self) -> str:
		"""Return the label."""
		return self.label

	def display(self, with_emoji: bool = False) -> str:
		"""
		Return the text shown for this type in the selection list.

		Args:
		        with_emoji: Prefix the label with the type emoji

		Returns:
		        Display string for the type

		"""
		if with_emoji:
			return f"{self.emoji} {self.label}"
		return self.label

	@classmethod
	def from_label(cls, label: str) -> CommitType:
		"""
		Look up a commit type by its label, ignoring case.

		Args:
		        label: Label to look up, e.g. "feat"

		Returns:
		        The matching CommitType

		Raises:
		        ValueError: If no type has this label

		"""
		wanted = label.strip().lower()
		for commit_type in cls:
			if commit_type.label == wanted:
				return commit_type
		msg = f"Unknown commit type: {label!r}"
		raise ValueError(msg)


def filter_types(query: str) -> list[CommitType]:
	"""
	Return the commit types whose label contains the query.

	Matching is a case-insensitive substring test. Matches keep their
	canonical order and an empty query returns every type.

	Args:
	        query: Text typed by the user

	Returns:
	        Ordered list of matching commit types, possibly empty

	"""
	needle = query.lower()
	return [commit_type for commit_type in CommitType if needle in commit_type.label.lower()]
