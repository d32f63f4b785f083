"""
RSTASK - Markdown Task Files
============================

Each task is a markdown file: a YAML header between two `---` lines, then
free-form notes.

Usage:
    from rstask import Task, TaskManager, Preferences, task_to_markdown

    task = Task(uuid="2b7c...", summary="Write report", tags=["work"])
    text = task_to_markdown(task)
    same = task_from_markdown(text, task.uuid, task.status, 1)

    manager = TaskManager("~/.rstask")
    manager.save(task)
    pending = manager.list_tasks(["pending"])

    prefs = Preferences.load()
"""

from .schema import (
    Task,
    SubTask,
    TaskStatus,
    TaskFrontmatter,
)

from .errors import RstaskError, ParseError, FormatError
from .frontmatter import task_to_markdown, task_from_markdown
from .preferences import (
    Preferences,
    SyncFrequency,
    BulkCommitStrategy,
    config_path,
)
from .manager import TaskManager

__version__ = "0.1.0"
__all__ = [
    "Task",
    "SubTask",
    "TaskStatus",
    "TaskFrontmatter",
    "RstaskError",
    "ParseError",
    "FormatError",
    "task_to_markdown",
    "task_from_markdown",
    "Preferences",
    "SyncFrequency",
    "BulkCommitStrategy",
    "config_path",
    "TaskManager",
]
