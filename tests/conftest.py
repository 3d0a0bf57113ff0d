"""Global test fixtures and configuration."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from gcz.utils.config_loader import ConfigLoader

if TYPE_CHECKING:
	from collections.abc import Generator
	from pathlib import Path


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
	"""
	Run every test from an empty directory with no user configuration.

	Keeps a developer's own .gcz.yml, XDG config or GCZ_* variables from
	leaking into the tests.

	"""
	for name in list(os.environ):
		if name.startswith("GCZ_"):
			monkeypatch.delenv(name)
	monkeypatch.delenv("EDITOR", raising=False)
	monkeypatch.setenv("HOME", str(tmp_path / "home"))
	monkeypatch.setattr("gcz.utils.config_loader.xdg_config_home", str(tmp_path / "xdg"))
	monkeypatch.chdir(tmp_path)
	ConfigLoader._instance = None  # noqa: SLF001

	yield tmp_path

	ConfigLoader._instance = None  # noqa: SLF001
