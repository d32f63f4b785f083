# tests/conftest.py

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest

from rstask.manager import TaskManager
from rstask.schema import SubTask, Task


@pytest.fixture()
def created() -> datetime:
    return datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture()
def basic_task(created: datetime) -> Task:
    """The task used throughout the codec examples."""
    return Task(
        uuid="test-uuid",
        status="pending",
        id=1,
        summary="Test task",
        notes="This is a note\nWith multiple lines",
        tags=["tag1", "tag2"],
        project="myproject",
        priority="H",
        created=created,
    )


@pytest.fixture()
def full_task() -> Task:
    """Every persisted field set, including sub-second timestamps."""
    return Task(
        uuid="6f1c1e8a-3b55-4a1e-9a55-0d6c3c1f2b7e",
        status="active",
        id=7,
        summary="Renew passport",
        notes="Bring two photos.\n\n- old passport\n- form DS-82",
        tags=["admin", "travel"],
        project="life",
        priority="P1",
        delegated_to="alice",
        subtasks=[SubTask(text="fill form", done=True), SubTask(text="post it")],
        dependencies=["0a9d3c3e-1111-2222-3333-444455556666"],
        created=datetime(2024, 3, 5, 9, 30, 15, 250000, tzinfo=timezone.utc),
        resolved=datetime(2024, 3, 9, 18, 0, tzinfo=timezone.utc),
        due=datetime(2024, 4, 1, 12, 0, tzinfo=timezone.utc),
    )


@pytest.fixture()
def manager(tmp_path: Path) -> TaskManager:
    return TaskManager(tasks_dir=tmp_path / "tasks")
