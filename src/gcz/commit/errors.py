"""Errors shared by the gcz prompt stages."""


class UserCancelled(Exception):
	"""Raised when the user aborts the prompt."""
