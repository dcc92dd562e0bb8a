"""Command-line entry point.

    task-control-panel -port=8080 -token=your-secret-token

Single-dash flags are accepted alongside the double-dash spelling. Flags
override TASK_PANEL_* environment variables, which override defaults.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Any, Optional

import uvicorn

from task_control_panel.infrastructure.configuration.main_settings import Settings
from task_control_panel.infrastructure.entrypoints.api.app_factory import create_app
from task_control_panel.infrastructure.observability.logger_factory_service import (
    configure_logging,
    get_logger,
)
from task_control_panel.infrastructure.observability.tracing_setup import configure_tracing

logger = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="task-control-panel",
        description="Serve the scheduled task list to remote agents over HTTP.",
    )
    parser.add_argument("-port", "--port", type=int, help="listen port (default 8080)")
    parser.add_argument("-token", "--token", help="shared bearer token for /api routes")
    parser.add_argument("-host", "--host", help="bind address (default 0.0.0.0)")
    parser.add_argument("-tasks-file", "--tasks-file", dest="tasks_file", help="path of the tasks JSON file")
    parser.add_argument("-log-level", "--log-level", dest="log_level", help="DEBUG, INFO, WARNING or ERROR")
    return parser


def settings_from_args(argv: Optional[Sequence[str]] = None) -> Settings:
    args = build_parser().parse_args(argv)
    overrides: dict[str, Any] = {
        key: value for key, value in vars(args).items() if value is not None
    }
    return Settings(**overrides)


def run(argv: Optional[Sequence[str]] = None) -> None:
    settings = settings_from_args(argv)
    configure_logging(settings.log_level)
    configure_tracing()

    app = create_app(settings)
    logger.info("Control panel starting", host=settings.host, port=settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
