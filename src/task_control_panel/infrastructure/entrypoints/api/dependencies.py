from fastapi import Request
from pydantic import ValidationError

from task_control_panel.application.core.domain.entities.task import Task
from task_control_panel.application.core.domain.exceptions.malformed_request_error import (
    MalformedRequestError,
)
from task_control_panel.application.core.services.task_store import TaskStore
from task_control_panel.infrastructure.common.dtos.task_dto import TaskDTO, TaskListAdapter
from task_control_panel.infrastructure.common.mappers.task_mapper import TaskMapper


def get_task_store(request: Request) -> TaskStore:
    return request.app.state.task_store


async def read_task(request: Request) -> Task:
    body = await request.body()
    try:
        dto = TaskDTO.model_validate_json(body)
    except ValidationError as exc:
        raise MalformedRequestError(message=describe_validation_error(exc)) from exc
    return TaskMapper.to_domain(dto)


async def read_task_list(request: Request) -> list[Task]:
    body = await request.body()
    try:
        dtos = TaskListAdapter.validate_json(body)
    except ValidationError as exc:
        raise MalformedRequestError(message=describe_validation_error(exc)) from exc
    return [TaskMapper.to_domain(dto) for dto in dtos]


def describe_validation_error(exc: ValidationError) -> str:
    """Single-line summary of a pydantic error, e.g. "0.id: Input should be a valid string"."""
    parts = []
    for error in exc.errors(include_url=False):
        location = ".".join(str(part) for part in error.get("loc", ()))
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(parts) or "invalid request body"
