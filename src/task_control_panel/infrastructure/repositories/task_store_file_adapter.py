import json
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from task_control_panel.application.core.domain.entities.task import Task
from task_control_panel.application.core.domain.exceptions.persistence_error import (
    PersistenceError,
)
from task_control_panel.application.core.ports.task_repository_port import TaskRepositoryPort
from task_control_panel.infrastructure.common.dtos.task_dto import TaskListAdapter
from task_control_panel.infrastructure.common.mappers.task_mapper import TaskMapper
from task_control_panel.infrastructure.observability.logger_factory_service import get_logger
from task_control_panel.infrastructure.observability.tracing_setup import trace_operation

logger = get_logger("task_store_file_adapter")


class TaskStoreFileAdapter(TaskRepositoryPort):
    """Keeps the task list in a single indented JSON array file."""

    def __init__(self, file_path: Path):
        self.file_path = Path(file_path)
        self.store_dir = self.file_path.parent

    @trace_operation("task_file.load")
    def load(self) -> list[Task]:
        if not self.file_path.exists():
            logger.info("Tasks file not found, starting empty", path=str(self.file_path))
            return []
        try:
            with open(self.file_path, encoding="utf-8") as f:
                content = f.read()
            dtos = TaskListAdapter.validate_json(content)
        except (ValidationError, OSError, UnicodeDecodeError) as e:
            logger.warning(
                "Failed to read tasks file, starting empty",
                path=str(self.file_path),
                error_type=type(e).__name__,
                error_details=str(e),
            )
            return []
        return [TaskMapper.to_domain(dto) for dto in dtos]

    @trace_operation("task_file.save")
    def save(self, tasks: list[Task]) -> None:
        self._write_json(TaskMapper.to_json_list(tasks))

    def _write_json(self, data: list[dict]):
        """
        Atomic write: write to temp file then rename.
        """
        tmp_path = None
        try:
            self.store_dir.mkdir(parents=True, exist_ok=True)
            # Temp file in the same directory so os.replace never crosses filesystems
            with tempfile.NamedTemporaryFile(
                "w", dir=self.store_dir, prefix=f".{self.file_path.name}.", suffix=".tmp",
                delete=False, encoding="utf-8",
            ) as tmp:
                tmp_path = tmp.name
                json.dump(data, tmp, indent=2, ensure_ascii=False)
                tmp.flush()
                os.fsync(tmp.fileno())

            os.replace(tmp_path, self.file_path)

        except OSError as e:
            logger.error(
                "Failed to write tasks file",
                path=str(self.file_path),
                error_type=type(e).__name__,
                error_details=str(e),
            )
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise PersistenceError(f"Failed to write tasks file: {e}", path=str(self.file_path)) from e
