"""gcz - interactive conventional commit message composer."""

__version__ = "0.3.0"
