from fastapi import APIRouter, Depends

from task_control_panel.application.core.domain.configuration.known_task_type import (
    KnownTaskType,
)
from task_control_panel.application.core.domain.entities.task import Task
from task_control_panel.application.core.services.task_store import SaveOutcome, TaskStore
from task_control_panel.infrastructure.common.mappers.task_mapper import TaskMapper
from task_control_panel.infrastructure.entrypoints.api.dependencies import (
    get_task_store,
    read_task,
    read_task_list,
)
from task_control_panel.infrastructure.entrypoints.api.security import require_bearer_token
from task_control_panel.infrastructure.observability.logger_factory_service import get_logger
from task_control_panel.infrastructure.observability.metrics_service import (
    PERSISTENCE_FAILURES_TOTAL,
    TASK_MUTATIONS_TOTAL,
    TASKS_STORED,
)

logger = get_logger("task_router")
router = APIRouter(prefix="/api", dependencies=[Depends(require_bearer_token)])


@router.get("/tasks", response_model=None)
def list_tasks(store: TaskStore = Depends(get_task_store)) -> list[dict]:
    return TaskMapper.to_json_list(store.list())


@router.post("/tasks", response_model=None)
def overwrite_tasks(
    tasks: list[Task] = Depends(read_task_list),
    store: TaskStore = Depends(get_task_store),
) -> dict[str, str]:
    for task in tasks:
        _note_task_type(task)
    outcome = store.replace_all(tasks)
    _record_mutation("replace_all", outcome, store, task_count=len(tasks))
    return {"status": "updated"}


@router.post("/tasks/add", response_model=None)
def add_task(
    task: Task = Depends(read_task),
    store: TaskStore = Depends(get_task_store),
) -> dict[str, str]:
    _note_task_type(task)
    outcome = store.add(task)
    _record_mutation("add", outcome, store, task_id=task.id)
    return {"status": "added"}


@router.put("/tasks/{task_id}", response_model=None)
def update_task(
    task_id: str,
    task: Task = Depends(read_task),
    store: TaskStore = Depends(get_task_store),
) -> dict[str, str]:
    _note_task_type(task)
    outcome = store.update(task_id, task)
    _record_mutation("update", outcome, store, task_id=task_id)
    return {"status": "updated"}


@router.delete("/tasks/{task_id}", response_model=None)
def delete_task(
    task_id: str,
    store: TaskStore = Depends(get_task_store),
) -> dict[str, str]:
    outcome = store.delete(task_id)
    _record_mutation("delete", outcome, store, task_id=task_id)
    return {"status": "deleted"}


def _record_mutation(operation: str, outcome: SaveOutcome, store: TaskStore, **fields) -> None:
    TASK_MUTATIONS_TOTAL.labels(operation=operation).inc()
    TASKS_STORED.set(store.count())
    if outcome.persisted:
        logger.info("Task list changed", operation=operation, **fields)
        return

    # The response still reports success; memory holds the change, the file does not.
    PERSISTENCE_FAILURES_TOTAL.labels(operation=operation).inc()
    logger.warning(
        "Task list changed in memory but was not persisted",
        operation=operation,
        error_type="PersistenceError",
        error_details=outcome.error,
        error_retryable=True,
        **fields,
    )


def _note_task_type(task: Task) -> None:
    # Executors own the type/config convention; the panel only flags obvious gaps.
    if task.type == KnownTaskType.UPDATE_CONFIG and task.config is None:
        logger.warning("update_config task has no config", task_id=task.id)
