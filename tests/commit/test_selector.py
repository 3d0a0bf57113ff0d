"""Tests for the commit type selection state machine."""

from __future__ import annotations

import pytest

from gcz.commit.message import CommitDraft, compose_message
from gcz.commit.selector import Char, Key, NoSelectionError, SelectorState, TypeSelector
from gcz.commit.types import CommitType


def typed(text: str) -> list[Char]:
	"""Key events for typing text one character at a time."""
	return [Char(ch) for ch in text]


@pytest.fixture
def selector() -> TypeSelector:
	"""A fresh selector."""
	return TypeSelector()


@pytest.mark.unit
class TestTypeSelectorOperations:
	"""Test cases for filter, move_cursor and confirm_selection."""

	def test_initial_state(self, selector: TypeSelector) -> None:
		"""A new selector shows every type with the first one highlighted."""
		assert selector.state is SelectorState.FILTERING
		assert selector.matches == list(CommitType)
		assert selector.cursor == 0
		assert selector.selected is CommitType.FEAT

	def test_filter_resets_cursor(self, selector: TypeSelector) -> None:
		"""Changing the query moves the cursor back to the first match."""
		selector.move_cursor(3)
		assert selector.filter("f") == [CommitType.FEAT, CommitType.FIX, CommitType.REFACTOR, CommitType.PERF]
		assert selector.cursor == 0

	def test_move_cursor_clamps(self, selector: TypeSelector) -> None:
		"""The cursor never leaves the bounds of the filtered list."""
		selector.filter("f")
		assert selector.move_cursor(-1) == 0
		assert selector.move_cursor(1) == 1
		assert selector.move_cursor(1) == 2
		assert selector.move_cursor(1) == 3
		assert selector.move_cursor(1) == 3
		assert selector.selected is CommitType.PERF

	def test_move_cursor_on_empty_list(self, selector: TypeSelector) -> None:
		"""Moving is a no-op when nothing matches."""
		selector.filter("zz")
		assert selector.move_cursor(1) is None
		assert selector.move_cursor(-1) is None
		assert selector.selected is None

	def test_confirm_selection(self, selector: TypeSelector) -> None:
		"""Confirming locks in the highlighted type."""
		selector.filter("fe")
		assert selector.confirm_selection() is CommitType.FEAT
		assert selector.state is SelectorState.CONFIRMED
		assert selector.choice is CommitType.FEAT

	def test_confirm_with_no_matches(self, selector: TypeSelector) -> None:
		"""Confirming an empty list fails without ending the loop."""
		selector.filter("zz")
		with pytest.raises(NoSelectionError):
			selector.confirm_selection()
		assert selector.state is SelectorState.FILTERING
		assert selector.choice is None

	@pytest.mark.parametrize("query", ["zz", "q", "featx", "xyz"])
	def test_confirm_fails_whenever_filter_is_empty(self, selector: TypeSelector, query: str) -> None:
		"""NoSelectionError is raised for any query with no matches."""
		assert selector.filter(query) == []
		with pytest.raises(NoSelectionError):
			selector.confirm_selection()


@pytest.mark.unit
class TestTypeSelectorEvents:
	"""Test cases driving the selector with scripted key events."""

	def test_type_and_confirm(self, selector: TypeSelector) -> None:
		"""Typing 'fe' and pressing enter selects feat."""
		state = selector.run([*typed("fe"), Key.CONFIRM])
		assert state is SelectorState.CONFIRMED
		assert selector.choice is CommitType.FEAT

	def test_navigate_and_confirm(self, selector: TypeSelector) -> None:
		"""Arrow keys pick a later match."""
		state = selector.run([Char("f"), Key.DOWN, Key.DOWN, Key.UP, Key.DOWN, Key.CONFIRM])
		assert state is SelectorState.CONFIRMED
		assert selector.choice is CommitType.REFACTOR

	def test_zero_match_confirm_keeps_loop_alive(self, selector: TypeSelector) -> None:
		"""Enter on an empty list is ignored and backspace widens the filter again."""
		assert selector.handle(Char("z")) is SelectorState.FILTERING
		assert selector.handle(Char("z")) is SelectorState.FILTERING
		assert selector.matches == []
		assert selector.handle(Key.CONFIRM) is SelectorState.FILTERING
		assert selector.handle(Key.DOWN) is SelectorState.FILTERING

		selector.handle(Key.BACKSPACE)
		selector.handle(Key.BACKSPACE)
		assert selector.query == ""
		assert selector.matches == list(CommitType)

		assert selector.run([*typed("ci"), Key.CONFIRM]) is SelectorState.CONFIRMED
		assert selector.choice is CommitType.CI

	def test_backspace_on_empty_query(self, selector: TypeSelector) -> None:
		"""Backspace with nothing typed keeps the full list."""
		selector.handle(Key.BACKSPACE)
		assert selector.query == ""
		assert selector.matches == list(CommitType)

	def test_clear_query(self, selector: TypeSelector) -> None:
		"""Escape clears the query and resets the cursor."""
		selector.run([*typed("doc"), Key.CLEAR])
		assert selector.query == ""
		assert selector.cursor == 0
		assert selector.matches == list(CommitType)

	def test_typing_is_case_insensitive(self, selector: TypeSelector) -> None:
		"""Upper-case keystrokes still match."""
		selector.run([*typed("TES"), Key.CONFIRM])
		assert selector.choice is CommitType.TEST

	def test_abort(self, selector: TypeSelector) -> None:
		"""Abort ends the loop without a choice."""
		state = selector.run([*typed("fi"), Key.ABORT, Key.CONFIRM])
		assert state is SelectorState.CANCELLED
		assert selector.choice is None

	def test_events_after_terminal_state_are_ignored(self, selector: TypeSelector) -> None:
		"""Once confirmed, further keys change nothing."""
		selector.run([Key.CONFIRM])
		assert selector.handle(Char("x")) is SelectorState.CONFIRMED
		assert selector.handle(Key.ABORT) is SelectorState.CONFIRMED
		assert selector.query == ""
		assert selector.choice is CommitType.FEAT

	def test_events_run_out(self, selector: TypeSelector) -> None:
		"""Without enter or abort the selector keeps filtering."""
		assert selector.run(typed("per")) is SelectorState.FILTERING
		assert selector.selected is CommitType.PERF

	def test_full_flow_to_message(self, selector: TypeSelector) -> None:
		"""Selection feeds a draft that formats as expected."""
		selector.run([*typed("fe"), Key.CONFIRM])
		draft = CommitDraft(selector.choice, scope="api", subject="add login", body="")
		assert compose_message(draft) == "feat(api): add login"
