"""Utility module for gcz package."""

from .config_loader import ConfigError, ConfigLoader
from .git_utils import GitError, commit, has_staged_changes, is_inside_work_tree, run_git_command

__all__ = [
	"ConfigError",
	"ConfigLoader",
	"GitError",
	"commit",
	"has_staged_changes",
	"is_inside_work_tree",
	"run_git_command",
]
