"""
RSTASK - Task Manager
=====================
Task-file persistence on top of the frontmatter codec.

Layout: {tasks_dir}/{status}/{uuid}.md
The directory a file sits in is its status; the file name is its uuid.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .frontmatter import task_from_markdown, task_to_markdown
from .errors import ParseError
from .schema import Task, TaskStatus

logger = logging.getLogger("rstask")

TASK_SUFFIX = ".md"


class TaskManager:
    """
    Reads and writes one markdown file per task.

    Locking, atomic writes and git commits are left to the caller.
    """

    def __init__(self, tasks_dir: Union[str, Path] = "~/.rstask"):
        self.tasks_dir = Path(tasks_dir).expanduser()
        self.tasks_dir.mkdir(parents=True, exist_ok=True)

    # ========================================
    # PERSISTENCE OPERATIONS
    # ========================================

    def _get_task_file(self, uuid: str, status: str) -> Path:
        """Get path to a task markdown file"""
        return self.tasks_dir / status / f"{uuid}{TASK_SUFFIX}"

    def task_path(self, task: Task) -> Path:
        return self._get_task_file(task.uuid, task.status)

    def _remove_stale_copies(self, task: Task, keep: Optional[Path] = None) -> None:
        """Delete files of this uuid in every status directory except `keep`"""
        file_name = f"{task.uuid}{TASK_SUFFIX}"
        for status_dir in self.tasks_dir.iterdir():
            file_path = status_dir / file_name
            if file_path != keep and file_path.is_file():
                file_path.unlink()
                logger.debug(f"Removed {file_path}")

    def save(self, task: Task) -> None:
        """Write a task to its file (or remove it if the task is deleted)"""
        if task.deleted:
            self._remove_stale_copies(task)
            task.write_pending = False
            logger.info(f"🗑️ Deleted task: {task.uuid}")
            return

        content = task_to_markdown(task)

        file_path = self.task_path(task)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content, encoding="utf-8")

        # Status changes move the file between directories
        self._remove_stale_copies(task, keep=file_path)

        task.write_pending = False
        logger.info(f"✅ Saved task: {task.uuid} ({task.status}) {task.summary}")

    def load(self, uuid: str, status: str, id: int = 0) -> Optional[Task]:
        """Load one task; None if there is no such file"""
        file_path = self._get_task_file(uuid, status)

        if not file_path.exists():
            logger.warning(f"Task not found: {uuid} ({status})")
            return None

        content = file_path.read_text(encoding="utf-8")
        return task_from_markdown(content, uuid, status, id)

    def list_tasks(self, statuses: Optional[Iterable[str]] = None) -> List[Task]:
        """
        Load every task in the given status directories.

        Sorted by creation time; display ids are assigned from 1 in that
        order. Unparseable files are logged and skipped.
        """
        if statuses is None:
            statuses = [s.value for s in TaskStatus]

        tasks = []
        for status in statuses:
            status_dir = self.tasks_dir / status
            if not status_dir.is_dir():
                continue

            for file_path in sorted(status_dir.glob(f"*{TASK_SUFFIX}")):
                try:
                    content = file_path.read_text(encoding="utf-8")
                    tasks.append(task_from_markdown(content, file_path.stem, status, 0))
                except (OSError, UnicodeDecodeError, ParseError) as e:
                    logger.warning(f"Error reading {file_path}: {e}")

        tasks.sort(key=lambda t: t.created)
        for i, task in enumerate(tasks, start=1):
            task.id = i

        logger.info(f"📂 Loaded {len(tasks)} tasks from {self.tasks_dir}")
        return tasks
