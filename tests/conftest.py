"""Shared fixtures for the Pulseboard test suite."""

from datetime import date

import pytest

from pulseboard.domain.project import Project
from pulseboard.domain.task import Task, TaskStatus


@pytest.fixture
def today() -> date:
    return date(2026, 1, 15)


@pytest.fixture
def make_project():
    """Factory for projects whose tasks have the given statuses."""

    def _make(
        title: str = "Project",
        due_date: date = date(2026, 3, 1),
        statuses: tuple[TaskStatus, ...] = (),
        **fields,
    ) -> Project:
        tasks = [
            Task(title=f"Task {i + 1}", status=status)
            for i, status in enumerate(statuses)
        ]
        return Project(title=title, due_date=due_date, tasks=tasks, **fields)

    return _make


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep config and data out of the real home directory."""
    monkeypatch.setenv("PULSEBOARD_HOME", str(tmp_path / "home"))
    monkeypatch.setenv("PULSEBOARD_DATA_DIR", str(tmp_path / "data"))
    return tmp_path
