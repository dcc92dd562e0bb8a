from abc import ABC, abstractmethod

from task_control_panel.application.core.domain.entities.task import Task


class TaskRepositoryPort(ABC):
    """Durable storage boundary for the task list."""

    @abstractmethod
    def load(self) -> list[Task]:
        """Returns the persisted tasks, or an empty list when nothing usable is stored."""
        pass

    @abstractmethod
    def save(self, tasks: list[Task]) -> None:
        """Replaces the persisted tasks. Raises PersistenceError on failure."""
        pass
