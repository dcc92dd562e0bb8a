from typing import Any

from task_control_panel.application.core.domain.entities.task import Task, TaskConfig
from task_control_panel.infrastructure.common.dtos.task_dto import TaskConfigDTO, TaskDTO


class TaskMapper:
    """Translates between the wire/file DTOs and domain entities."""

    @staticmethod
    def to_domain(dto: TaskDTO) -> Task:
        config = None
        if dto.config is not None:
            config = TaskConfig(
                remote_url=dto.config.remote_url,
                auth_token=dto.config.auth_token,
            )
        return Task(
            id=dto.id,
            name=dto.name,
            schedule=dto.schedule,
            type=dto.type,
            payload=dto.payload,
            config=config,
        )

    @staticmethod
    def to_dto(task: Task) -> TaskDTO:
        config = None
        if task.config is not None:
            config = TaskConfigDTO(
                remote_url=task.config.remote_url,
                auth_token=task.config.auth_token,
            )
        return TaskDTO(
            id=task.id,
            name=task.name,
            schedule=task.schedule,
            type=task.type,
            payload=task.payload,
            config=config,
        )

    @classmethod
    def to_json_dict(cls, task: Task) -> dict[str, Any]:
        """
        JSON object for a task: payload is omitted when empty and config when absent.
        """
        data = cls.to_dto(task).model_dump(exclude_none=True)
        if not data.get("payload"):
            data.pop("payload", None)
        return data

    @classmethod
    def to_json_list(cls, tasks: list[Task]) -> list[dict[str, Any]]:
        return [cls.to_json_dict(task) for task in tasks]
