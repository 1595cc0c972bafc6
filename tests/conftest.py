"""
Shared pytest configuration for the Noted test suite.

Every test gets an isolated working directory and config home so a stray
db.db or config.toml on the developer machine never leaks in.
"""

import pytest

from noted.db import Database


@pytest.fixture(autouse=True)
def notes_home(tmp_path, monkeypatch):
    """Run each test from an empty directory with an empty XDG config home."""
    work_dir = tmp_path / "work"
    work_dir.mkdir()
    monkeypatch.chdir(work_dir)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.delenv("NOTED_DB", raising=False)
    monkeypatch.delenv("NOTED_LOG_LEVEL", raising=False)
    return work_dir


@pytest.fixture
def db():
    """A fresh in-memory store."""
    database = Database.in_memory()
    yield database
    database.close()


@pytest.fixture
def feed_input(monkeypatch):
    """Replace input() with a scripted sequence of lines, then EOF."""

    def _feed(lines: list[str]) -> list[str]:
        prompts: list[str] = []
        remaining = iter(lines)

        def fake_input(prompt: str = "") -> str:
            prompts.append(prompt)
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError from None

        monkeypatch.setattr("builtins.input", fake_input)
        return prompts

    return _feed
