# tests/test_manager.py

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from rstask.errors import ParseError
from rstask.manager import TaskManager
from rstask.schema import Task


def test_creates_tasks_dir(tmp_path: Path) -> None:
    TaskManager(tasks_dir=tmp_path / "a" / "b")
    assert (tmp_path / "a" / "b").is_dir()


def test_save_and_load(manager: TaskManager, full_task: Task) -> None:
    full_task.write_pending = True
    manager.save(full_task)

    path = manager.tasks_dir / "active" / f"{full_task.uuid}.md"
    assert path.is_file()
    assert path.read_text(encoding="utf-8").startswith("---\nsummary: Renew passport\n")
    assert not full_task.write_pending

    loaded = manager.load(full_task.uuid, "active", 3)
    assert loaded is not None
    assert loaded.id == 3
    assert loaded.summary == full_task.summary
    assert loaded.notes == full_task.notes
    assert loaded.subtasks == full_task.subtasks
    assert loaded.created == full_task.created


def test_load_missing(manager: TaskManager) -> None:
    assert manager.load("nope", "pending") is None


def test_load_broken_file_raises(manager: TaskManager) -> None:
    path = manager.tasks_dir / "pending" / "bad.md"
    path.parent.mkdir(parents=True)
    path.write_text("summary: no header\n", encoding="utf-8")

    with pytest.raises(ParseError):
        manager.load("bad", "pending")


def test_status_change_moves_file(manager: TaskManager, basic_task: Task) -> None:
    manager.save(basic_task)
    old = manager.task_path(basic_task)

    basic_task.status = "resolved"
    basic_task.resolved = datetime(2024, 2, 1, tzinfo=timezone.utc)
    manager.save(basic_task)

    assert not old.exists()
    assert manager.task_path(basic_task).is_file()
    assert manager.load("test-uuid", "resolved").resolved == basic_task.resolved


def test_deleted_task_removes_file(manager: TaskManager, basic_task: Task) -> None:
    manager.save(basic_task)
    basic_task.deleted = True
    manager.save(basic_task)

    assert not manager.task_path(basic_task).exists()
    assert manager.list_tasks() == []


def test_list_tasks_orders_and_numbers(
    manager: TaskManager, created: datetime, caplog: pytest.LogCaptureFixture
) -> None:
    later = Task(uuid="b-later", status="pending", summary="second", created=created + timedelta(days=1))
    earlier = Task(uuid="z-earlier", status="active", summary="first", created=created)
    done = Task(uuid="c-done", status="resolved", summary="done", created=created - timedelta(days=1))
    for t in (later, earlier, done):
        manager.save(t)

    broken = manager.tasks_dir / "pending" / "broken.md"
    broken.write_text("---\nsummary: missing closing line\n", encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="rstask"):
        tasks = manager.list_tasks(["pending", "active"])

    assert [t.summary for t in tasks] == ["first", "second"]
    assert [t.id for t in tasks] == [1, 2]
    assert [t.status for t in tasks] == ["active", "pending"]
    assert tasks[0].uuid == "z-earlier"
    assert "broken.md" in caplog.text

    assert [t.uuid for t in manager.list_tasks()] == ["c-done", "z-earlier", "b-later"]


def test_list_tasks_ignores_missing_status_dirs(manager: TaskManager) -> None:
    assert manager.list_tasks(["pending", "paused"]) == []


def test_wildcard_characters_in_uuid_match_literally(manager: TaskManager, created: datetime) -> None:
    keep = Task(uuid="abc-keep", status="pending", summary="unrelated", created=created)
    other = Task(uuid="a?c-keep", status="paused", summary="unrelated too", created=created)
    odd = Task(uuid="a*", status="active", summary="odd name", created=created)
    for t in (keep, other, odd):
        manager.save(t)

    odd.status = "resolved"
    manager.save(odd)
    odd.deleted = True
    manager.save(odd)

    assert manager.load("abc-keep", "pending") is not None
    assert manager.load("a?c-keep", "paused") is not None
    assert [t.uuid for t in manager.list_tasks()] == ["abc-keep", "a?c-keep"]
