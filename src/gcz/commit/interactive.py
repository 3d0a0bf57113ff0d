"""Interactive commit composition for gcz."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import questionary
from prompt_toolkit.application import Application
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import Layout
from prompt_toolkit.layout.containers import Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.styles import Style
from rich.console import Console

from .editor import edit_message, split_edited_message
from .errors import UserCancelled
from .message import CommitDraft, compose_message, format_header, is_valid_scope
from .selector import Char, Key, KeyEvent, SelectorState, TypeSelector

if TYPE_CHECKING:
	from prompt_toolkit.formatted_text import StyleAndTextTuples
	from prompt_toolkit.input import Input
	from prompt_toolkit.key_binding import KeyPressEvent
	from prompt_toolkit.output import Output

	from .types import CommitType

logger = logging.getLogger(__name__)
console = Console()

SELECTOR_STYLE = Style.from_dict(
	{
		"prompt": "bold",
		"query": "#00aaaa",
		"pointer": "#00aa00 bold",
		"selected": "#00aa00 bold",
		"description": "#888888",
		"empty": "#aaaa00 italic",
		"hint": "#666666",
	}
)

# Key name -> selector event
KEY_EVENTS: dict[str, Key] = {
	"up": Key.UP,
	"down": Key.DOWN,
	"enter": Key.CONFIRM,
	"backspace": Key.BACKSPACE,
	"escape": Key.CLEAR,
	"c-c": Key.ABORT,
	"c-d": Key.ABORT,
}


def render_selector(selector: TypeSelector, with_emoji: bool = False) -> StyleAndTextTuples:
	"""
	Build the formatted text for the type list.

	Args:
	        selector: Selector whose state is rendered
	        with_emoji: Prefix each label with its emoji

	Returns:
	        prompt_toolkit formatted text fragments

	"""
	fragments: StyleAndTextTuples = [
		("class:prompt", "Select a commit type: "),
		("class:query", selector.query),
		("", "\n"),
	]

	if not selector.matches:
		fragments.append(("class:empty", "  no matching types, press backspace to widen the filter\n"))

	width = max((len(t.display(with_emoji)) for t in selector.matches), default=0)
	for index, commit_type in enumerate(selector.matches):
		label = commit_type.display(with_emoji).ljust(width)
		if index == selector.cursor:
			fragments.append(("class:pointer", "❯ "))
			fragments.append(("class:selected", label))
		else:
			fragments.append(("", f"  {label}"))
		fragments.append(("class:description", f"  {commit_type.description}\n"))

	fragments.append(("class:hint", "(type to filter, ↑/↓ to move, enter to select, esc to clear)"))
	return fragments


def build_key_bindings(selector: TypeSelector) -> KeyBindings:
	"""
	Translate keystrokes into selector events.

	The running application exits with the selector state as soon as the
	selector confirms or is cancelled.

	Args:
	        selector: Selector that receives the events

	Returns:
	        Key bindings for the selection application

	"""
	bindings = KeyBindings()

	def dispatch(event: KeyPressEvent, key_event: KeyEvent) -> None:
		state = selector.handle(key_event)
		if state is not SelectorState.FILTERING:
			event.app.exit(result=state)

	for key_name, key_event in KEY_EVENTS.items():

		def handler(event: KeyPressEvent, key_event: Key = key_event) -> None:
			dispatch(event, key_event)

		bindings.add(key_name, eager=key_name == "escape")(handler)

	@bindings.add(Keys.Any)
	def _typed(event: KeyPressEvent) -> None:
		text = "".join(ch for ch in event.data if ch.isprintable())
		if text:
			dispatch(event, Char(text))

	return bindings


def select_commit_type(
	with_emoji: bool = False,
	input: Input | None = None,  # noqa: A002
	output: Output | None = None,
) -> CommitType:
	"""
	Let the user pick a commit type from a filterable list.

	Args:
	        with_emoji: Show the type emoji next to each label
	        input: prompt_toolkit input to read keys from (defaults to the terminal)
	        output: prompt_toolkit output to render to (defaults to the terminal)

	Returns:
	        The confirmed commit type

	Raises:
	        UserCancelled: If the user aborts the selection

	"""
	selector = TypeSelector()
	control = FormattedTextControl(lambda: render_selector(selector, with_emoji), show_cursor=False)
	app: Application[SelectorState] = Application(
		layout=Layout(Window(control, wrap_lines=False)),
		key_bindings=build_key_bindings(selector),
		style=SELECTOR_STYLE,
		full_screen=False,
		erase_when_done=True,
		input=input,
		output=output,
	)

	state = app.run()
	if state is not SelectorState.CONFIRMED or selector.choice is None:
		logger.debug("Type selection ended in state %s", state)
		msg = "Commit type selection cancelled"
		raise UserCancelled(msg)

	console.print(f"Selected commit type: [cyan]{selector.choice.label}[/cyan]")
	return selector.choice


def _scope_validator(text: str) -> bool | str:
	"""Reject scopes that would break the header parentheses."""
	return True if is_valid_scope(text.strip()) else "Scope cannot contain parentheses or line breaks"


def _subject_validator(text: str) -> bool | str:
	"""Reject blank subject lines."""
	return True if text.strip() else "Subject cannot be empty"


class CommitPrompter:
	"""Collects a commit draft stage by stage."""

	def __init__(
		self,
		with_emoji: bool = False,
		use_editor: bool = False,
		editor: str | None = None,
		input: Input | None = None,  # noqa: A002
		output: Output | None = None,
	) -> None:
		"""
		Initialize the prompter.

		Args:
		        with_emoji: Show type emoji in the selection list
		        use_editor: Compose subject and body in an external editor
		        editor: Editor command used when use_editor is set
		        input: prompt_toolkit input shared by every prompt (defaults to the terminal)
		        output: prompt_toolkit output shared by every prompt (defaults to the terminal)

		"""
		self.with_emoji = with_emoji
		self.use_editor = use_editor
		self.editor = editor
		self.input = input
		self.output = output
		self.draft = CommitDraft()

	def _ask_text(self, message: str, **kwargs: Any) -> str:
		"""
		Run a questionary text prompt.

		Ctrl-C surfaces as KeyboardInterrupt and Ctrl-D on an empty line as
		EOFError; both abort the whole flow.

		Args:
		        message: Prompt label
		        **kwargs: Extra arguments for questionary.text, e.g. validate

		Returns:
		        The stripped answer

		Raises:
		        UserCancelled: If the prompt is aborted

		"""
		question = questionary.text(message, qmark="", input=self.input, output=self.output, **kwargs)
		try:
			answer = question.unsafe_ask()
		except (KeyboardInterrupt, EOFError) as e:
			msg = f"Prompt {message!r} cancelled"
			raise UserCancelled(msg) from e
		return answer.strip()

	def ask_scope(self) -> str:
		"""Ask for the optional scope."""
		return self._ask_text("Scope (optional):", validate=_scope_validator)

	def ask_subject(self) -> str:
		"""Ask for the subject line, which must not be blank."""
		return self._ask_text("Subject:", validate=_subject_validator)

	def ask_body(self) -> str:
		"""Ask for the optional body."""
		return self._ask_text("Body (optional):")

	def _edit_subject_and_body(self) -> None:
		"""Fill subject and body from the external editor."""
		if self.draft.commit_type is None:
			msg = "Commit type must be selected before editing"
			raise RuntimeError(msg)

		header = format_header(self.draft.commit_type, self.draft.scope, "")
		edited = edit_message(header, editor=self.editor)
		draft = split_edited_message(edited)
		self.draft.commit_type = draft.commit_type
		self.draft.scope = draft.scope
		self.draft.subject = draft.subject
		self.draft.body = draft.body

	def collect_draft(self) -> CommitDraft:
		"""
		Run every prompt stage and return the filled-in draft.

		Returns:
		        Draft with a type and non-empty subject

		Raises:
		        UserCancelled: If the user aborts any stage

		"""
		self.draft.commit_type = select_commit_type(with_emoji=self.with_emoji, input=self.input, output=self.output)
		self.draft.scope = self.ask_scope()

		if self.use_editor:
			self._edit_subject_and_body()
		else:
			self.draft.subject = self.ask_subject()
			self.draft.body = self.ask_body()

		logger.debug("Collected draft: %s", self.draft)
		return self.draft

	def compose(self) -> str:
		"""Collect a draft and format it as a commit message."""
		return compose_message(self.collect_draft())
