"""
RSTASK - Task Schema Definition
===============================
In-memory task record plus the persistable header view written to disk.

A task file is markdown with a YAML header:

    ---
    summary: Write report
    tags:
    - work
    created: 2024-01-01T00:00:00Z
    ---

    Notes go here.
"""

from enum import Enum
from typing import Optional, List
from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field, field_validator


class TaskStatus(str, Enum):
    """Task lifecycle states (one storage directory each)"""
    PENDING = "pending"       # Not started
    ACTIVE = "active"         # Currently being worked on
    PAUSED = "paused"         # Started, then put aside
    RESOLVED = "resolved"     # Done
    RECURRING = "recurring"   # Spawns pending copies
    TEMPLATE = "template"     # Blueprint for new tasks


def utc(value: Optional[datetime]) -> Optional[datetime]:
    """Normalize a datetime to UTC; naive values are taken as UTC"""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class SubTask(BaseModel):
    """Checklist item inside a task"""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    text: str
    done: bool = False


class Task(BaseModel):
    """Individual task record"""

    # Supplied by the storage layer, never persisted
    uuid: str
    status: str = TaskStatus.PENDING.value
    write_pending: bool = False
    id: int = 0
    deleted: bool = False

    # Persisted
    summary: str
    notes: str = ""
    tags: List[str] = Field(default_factory=list)
    project: str = ""
    priority: str = ""
    delegated_to: str = ""
    subtasks: List[SubTask] = Field(default_factory=list)
    dependencies: List[str] = Field(default_factory=list)
    created: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    resolved: Optional[datetime] = None
    due: Optional[datetime] = None

    # Used by query logic only
    filtered: bool = False

    @field_validator("created", "resolved", "due")
    @classmethod
    def normalize_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return utc(value)


class TaskFrontmatter(BaseModel):
    """
    Persistable view of a Task (everything except notes and transient fields).

    Field order is the key order on disk. Empty values are None and
    omitted when dumped.
    """
    model_config = ConfigDict(coerce_numbers_to_str=True)

    summary: str
    tags: Optional[List[str]] = None
    project: Optional[str] = None
    priority: Optional[str] = None
    delegatedto: Optional[str] = None
    subtasks: Optional[List[SubTask]] = None
    dependencies: Optional[List[str]] = None
    created: datetime
    resolved: Optional[datetime] = None
    due: Optional[datetime] = None

    @field_validator("created", "resolved", "due")
    @classmethod
    def normalize_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return utc(value)

    @classmethod
    def from_task(cls, task: Task) -> "TaskFrontmatter":
        return cls(
            summary=task.summary,
            tags=list(task.tags) or None,
            project=task.project or None,
            priority=task.priority or None,
            delegatedto=task.delegated_to or None,
            subtasks=[s.model_copy() for s in task.subtasks] or None,
            dependencies=list(task.dependencies) or None,
            created=task.created,
            resolved=task.resolved,
            due=task.due,
        )

    def to_task(self, uuid: str, status: str, id: int, notes: str) -> Task:
        return Task(
            uuid=uuid,
            status=status,
            write_pending=False,
            id=id,
            deleted=False,
            summary=self.summary,
            notes=notes,
            tags=self.tags or [],
            project=self.project or "",
            priority=self.priority or "",
            delegated_to=self.delegatedto or "",
            subtasks=self.subtasks or [],
            dependencies=self.dependencies or [],
            created=self.created,
            resolved=self.resolved,
            due=self.due,
            filtered=False,
        )
