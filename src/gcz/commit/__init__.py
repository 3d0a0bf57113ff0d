"""
Commit type selection and conventional commit message composition.

The types, selector and message modules are free of terminal and git
dependencies; interactive and editor wrap them for the command line.

"""

from .errors import UserCancelled
from .message import (
	CommitDraft,
	DraftError,
	EmptySubjectError,
	InvalidScopeError,
	MessageParseError,
	MissingTypeError,
	compose_message,
	parse_message,
)
from .selector import Char, Key, NoSelectionError, SelectorState, TypeSelector
from .types import CommitType, filter_types

__all__ = [
	"Char",
	"CommitDraft",
	"CommitType",
	"DraftError",
	"EmptySubjectError",
	"InvalidScopeError",
	"Key",
	"MessageParseError",
	"MissingTypeError",
	"NoSelectionError",
	"SelectorState",
	"TypeSelector",
	"UserCancelled",
	"compose_message",
	"filter_types",
	"parse_message",
]
