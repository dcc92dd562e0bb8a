from importlib.metadata import PackageNotFoundError, version

from fastapi import APIRouter, Depends, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from task_control_panel.application.core.services.task_store import TaskStore
from task_control_panel.infrastructure.entrypoints.api.dependencies import get_task_store

router = APIRouter()


@router.get("/health")
def health_check(store: TaskStore = Depends(get_task_store)):
    try:
        app_version = version("task-control-panel")
    except PackageNotFoundError:
        app_version = "0.0.0"

    return {
        "status": "ok",
        "service": "task-control-panel",
        "version": app_version,
        "tasks": store.count(),
    }


@router.get("/metrics")
def metrics() -> Response:
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
