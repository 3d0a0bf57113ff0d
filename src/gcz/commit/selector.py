"""Commit type selection state machine.

The selector holds the filter query, the filtered type list and the cursor,
and advances on discrete key events. It has no terminal dependency, so a
scripted event sequence drives it exactly like a keyboard does.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

from .types import CommitType, filter_types

if TYPE_CHECKING:
	from collections.abc import Iterable

logger = logging.getLogger(__name__)


class NoSelectionError(Exception):
	"""Raised when confirming while no commit type can be selected."""


class SelectorState(Enum):
	"""Lifecycle of a selection loop."""

	FILTERING = auto()
	CONFIRMED = auto()
	CANCELLED = auto()


class Key(Enum):
	"""Non-character key events."""

	BACKSPACE = auto()
	CLEAR = auto()
	UP = auto()
	DOWN = auto()
	CONFIRM = auto()
	ABORT = auto()


@dataclass(frozen=True)
class Char:
	"""Printable text typed into the filter query."""

	text: str


KeyEvent = Key | Char


@dataclass
class TypeSelector:
	"""Filterable, cursor-driven commit type picker."""

	query: str = ""
	cursor: int | None = 0
	state: SelectorState = SelectorState.FILTERING
	choice: CommitType | None = None
	matches: list[CommitType] = field(default_factory=lambda: filter_types(""))

	@property
	def selected(self) -> CommitType | None:
		"""The highlighted commit type, or None when nothing matches."""
		if self.cursor is None or not self.matches:
			return None
		return self.matches[self.cursor]

	@property
	def is_done(self) -> bool:
		"""Whether the loop reached a terminal state."""
		return self.state is not SelectorState.FILTERING

	def filter(self, query: str) -> list[CommitType]:
		"""
		Replace the query and recompute the matching types.

		The cursor goes back to the first match, or becomes inert when
		there are no matches.

		Args:
		        query: New filter query

		Returns:
		        Matching types in canonical order

		"""
		self.query = query
		self.matches = filter_types(query)
		self.cursor = 0 if self.matches else None
		logger.debug("Query %r matches %s", query, [t.label for t in self.matches])
		return self.matches

	def move_cursor(self, direction: int) -> int | None:
		"""
		Move the cursor up (-1) or down (+1) within the matches.

		Args:
		        direction: Step to move, clamped to the list bounds

		Returns:
		        The new cursor index, or None when the list is empty

		"""
		if not self.matches:
			self.cursor = None
			return None
		current = self.cursor or 0
		self.cursor = max(0, min(current + direction, len(self.matches) - 1))
		return self.cursor

	def confirm_selection(self) -> CommitType:
		"""
		Lock in the highlighted commit type.

		Returns:
		        The confirmed commit type

		Raises:
		        NoSelectionError: If no type matches the query

		"""
		selected = self.selected
		if selected is None:
			msg = f"No commit type matches {self.query!r}"
			raise NoSelectionError(msg)
		self.choice = selected
		self.state = SelectorState.CONFIRMED
		return selected

	def handle(self, event: KeyEvent) -> SelectorState:
		"""
		Apply a single key event.

		Args:
		        event: Key press to apply

		Returns:
		        The state after the event

		"""
		if self.is_done:
			return self.state

		match event:
			case Char(text=text):
				self.filter(self.query + text)
			case Key.BACKSPACE:
				self.filter(self.query[:-1])
			case Key.CLEAR:
				self.filter("")
			case Key.UP:
				self.move_cursor(-1)
			case Key.DOWN:
				self.move_cursor(1)
			case Key.CONFIRM:
				try:
					self.confirm_selection()
				except NoSelectionError as e:
					logger.debug("Ignoring confirm: %s", e)
			case Key.ABORT:
				self.state = SelectorState.CANCELLED

		return self.state

	def run(self, events: Iterable[KeyEvent]) -> SelectorState:
		"""
		Feed events until the selector confirms or is cancelled.

		Args:
		        events: Key events in the order they were pressed

		Returns:
		        The final state; FILTERING if the events ran out first

		"""
		for event in events:
			if self.handle(event) is not SelectorState.FILTERING:
				break
		return self.state
