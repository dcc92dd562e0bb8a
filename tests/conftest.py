import shutil
import tempfile
from pathlib import Path

import pytest

from task_control_panel.application.core.domain.entities.task import Task
from task_control_panel.application.core.ports.task_repository_port import TaskRepositoryPort
from task_control_panel.infrastructure.configuration.main_settings import Settings


class InMemoryTaskRepository(TaskRepositoryPort):
    """Records every saved snapshot instead of touching the disk."""

    def __init__(self, initial=None):
        self.initial = list(initial or [])
        self.saved: list[list[Task]] = []

    def load(self) -> list[Task]:
        return list(self.initial)

    def save(self, tasks: list[Task]) -> None:
        self.saved.append([Task(**vars(t)) for t in tasks])


@pytest.fixture
def temp_workspace():
    tmp = tempfile.mkdtemp()
    yield Path(tmp)
    shutil.rmtree(tmp)


@pytest.fixture
def settings(temp_workspace, monkeypatch):
    for var in ("TASK_PANEL_TOKEN", "TASK_PANEL_PORT", "TASK_PANEL_TASKS_FILE"):
        monkeypatch.delenv(var, raising=False)
    return Settings(
        app_name="TestPanel",
        token="test-token",
        tasks_file=temp_workspace / "runtime_data" / "tasks.json",
    )


@pytest.fixture
def auth_headers():
    return {"Authorization": "Bearer test-token"}


@pytest.fixture
def memory_repository():
    return InMemoryTaskRepository()
