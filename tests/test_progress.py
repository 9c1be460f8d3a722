"""Tests for progress calculation and the task status-transition rule."""

from datetime import UTC, date, datetime

import pytest

from pulseboard.application import add_task, create_project, update_project
from pulseboard.domain.project import ProjectDraft
from pulseboard.domain.task import (
    Task,
    TaskStatus,
    calculate_progress,
    percent,
    set_task_status,
)

DONE = TaskStatus.COMPLETED
TODO = TaskStatus.TODO
DOING = TaskStatus.IN_PROGRESS


def tasks_with(*statuses: TaskStatus) -> list[Task]:
    return [Task(title=f"t{i}", status=s) for i, s in enumerate(statuses)]


class TestCalculateProgress:
    def test_empty_list_is_zero(self):
        assert calculate_progress([]) == 0

    def test_one_of_four_completed(self):
        assert calculate_progress(tasks_with(DONE, TODO, TODO, DOING)) == 25

    def test_half_rounds_up(self):
        # 12.5% -> 13
        assert calculate_progress(tasks_with(DONE, *[TODO] * 7)) == 13

    @pytest.mark.parametrize(
        ("done", "total", "expected"),
        [(0, 3, 0), (1, 3, 33), (2, 3, 67), (3, 3, 100), (1, 6, 17)],
    )
    def test_ratios(self, done, total, expected):
        statuses = [DONE] * done + [TODO] * (total - done)
        assert calculate_progress(tasks_with(*statuses)) == expected

    def test_in_progress_counts_as_not_completed(self):
        assert calculate_progress(tasks_with(DOING, DOING)) == 0

    def test_idempotent(self):
        tasks = tasks_with(DONE, TODO, DONE)
        assert calculate_progress(tasks) == calculate_progress(tasks)


def test_percent_of_zero_whole():
    assert percent(0, 0) == 0


class TestSetTaskStatus:
    NOW = datetime(2026, 1, 15, 12, 0, tzinfo=UTC)

    def test_completing_stamps_completed_at(self):
        task = set_task_status(Task(title="a"), DONE, now=self.NOW)
        assert task.status == DONE
        assert task.completed_at == self.NOW

    def test_reopening_clears_completed_at(self):
        done = set_task_status(Task(title="a"), DONE, now=self.NOW)
        reopened = set_task_status(done, DOING)
        assert reopened.completed_at is None

    def test_already_completed_keeps_original_stamp(self):
        done = set_task_status(Task(title="a"), DONE, now=self.NOW)
        later = datetime(2026, 2, 1, tzinfo=UTC)
        assert set_task_status(done, DONE, now=later).completed_at == self.NOW

    def test_original_task_is_unchanged(self):
        task = Task(title="a")
        set_task_status(task, DONE, now=self.NOW)
        assert task.status == TODO
        assert task.completed_at is None

    @pytest.mark.parametrize("status", list(TaskStatus))
    def test_completed_at_present_exactly_when_completed(self, status):
        task = set_task_status(Task(title="a"), status, now=self.NOW)
        assert (task.completed_at is not None) == (task.status == DONE)

    def test_accepts_string_status(self):
        assert set_task_status(Task(title="a"), "in-progress").status == DOING

    def test_stamp_follows_each_transition(self):
        stamps = [
            datetime(2026, 1, 15, tzinfo=UTC),
            datetime(2026, 1, 16, tzinfo=UTC),
            datetime(2026, 1, 17, tzinfo=UTC),
            datetime(2026, 1, 18, tzinfo=UTC),
        ]
        task = Task(title="a")
        seen = []
        for status, now in zip((TODO, DONE, DOING, DONE), stamps):
            task = set_task_status(task, status, now=now)
            assert (task.completed_at is not None) == (task.status == DONE)
            seen.append(task.completed_at)
        assert seen == [None, stamps[1], None, stamps[3]]

    def test_stamp_follows_project_edits(self):
        project, _ = create_project(ProjectDraft(title="p", due_date=date(2026, 6, 1))).value
        project, _ = add_task(project, "a").value
        for status in (TODO, DONE, DOING, DONE):
            edited = ProjectDraft.from_project(project)
            edited.tasks[0] = edited.tasks[0].model_copy(update={"status": status})
            project, _ = update_project(project, edited).value
            task = project.tasks[0]
            assert task.status == status
            assert (task.completed_at is not None) == (status == DONE)


class TestTaskModel:
    def test_legacy_single_assignee_is_migrated(self):
        task = Task(**{"title": "a", "assignee": "Ana"})
        assert task.assignees == ["Ana"]

    def test_empty_legacy_assignee_becomes_empty_list(self):
        assert Task(**{"title": "a", "assignee": ""}).assignees == []

    def test_ids_are_unique(self):
        assert Task(title="a").id != Task(title="a").id
