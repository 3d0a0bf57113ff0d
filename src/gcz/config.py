"""Default configuration settings for gcz."""

DEFAULT_CONFIG = {
	# Commit composition settings
	"commit": {
		# Show the type emoji next to each entry in the type list
		"use_emoji": False,
		# Compose subject and body in an external editor instead of inline prompts
		"use_editor": False,
		# Editor command; falls back to $EDITOR, then vim
		"editor": None,
	},
	# Process exit codes handed back to the shell
	"exit_codes": {
		# User aborted the prompt (Ctrl-C / Ctrl-D)
		"cancelled": 130,
		# Not a repository, git failure or configuration error
		"failure": 1,
	},
}
