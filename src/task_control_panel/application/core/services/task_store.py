"""In-memory authoritative task list, mirrored to a repository on every mutation.

Duplicate ids are accepted as given: ``update`` replaces only the first match,
``delete`` removes every match.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Optional

import structlog

from task_control_panel.application.core.domain.entities.task import Task
from task_control_panel.application.core.domain.exceptions.persistence_error import (
    PersistenceError,
)
from task_control_panel.application.core.ports.task_repository_port import TaskRepositoryPort
from task_control_panel.application.core.services.read_write_lock import ReadWriteLock

logger = structlog.get_logger()


@dataclass(frozen=True)
class SaveOutcome:
    """Result of the persistence step that follows a mutation."""
    persisted: bool
    error: Optional[str] = None


class TaskStore:
    def __init__(self, repository: TaskRepositoryPort) -> None:
        self._repository = repository
        self._lock = ReadWriteLock()
        self._tasks: list[Task] = list(repository.load())
        logger.info("Task store ready", tasks_loaded=len(self._tasks))

    def list(self) -> list[Task]:
        with self._lock.read_locked():
            return copy.deepcopy(self._tasks)

    def count(self) -> int:
        with self._lock.read_locked():
            return len(self._tasks)

    def replace_all(self, new_tasks: list[Task]) -> SaveOutcome:
        with self._lock.write_locked():
            self._tasks = copy.deepcopy(list(new_tasks))
            return self._persist()

    def add(self, task: Task) -> SaveOutcome:
        with self._lock.write_locked():
            self._tasks.append(copy.deepcopy(task))
            return self._persist()

    def update(self, task_id: str, replacement: Task) -> SaveOutcome:
        with self._lock.write_locked():
            for index, current in enumerate(self._tasks):
                if current.id == task_id:
                    self._tasks[index] = copy.deepcopy(replacement)
                    break
            else:
                logger.info("Update matched no task", task_id=task_id)
            return self._persist()

    def delete(self, task_id: str) -> SaveOutcome:
        with self._lock.write_locked():
            remaining = [task for task in self._tasks if task.id != task_id]
            removed = len(self._tasks) - len(remaining)
            self._tasks = remaining
            if not removed:
                logger.info("Delete matched no task", task_id=task_id)
            return self._persist()

    def _persist(self) -> SaveOutcome:
        # Caller holds the write lock, so the snapshot written is the one just produced.
        try:
            self._repository.save(self._tasks)
        except PersistenceError as exc:
            return SaveOutcome(persisted=False, error=exc.message)
        return SaveOutcome(persisted=True)
