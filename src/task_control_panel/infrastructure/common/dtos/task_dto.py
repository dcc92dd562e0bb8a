from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, TypeAdapter, field_validator


def _null_to_empty(value: Any) -> Any:
    return "" if value is None else value


class TaskConfigDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    remote_url: str = ""
    auth_token: str = ""

    # JSON null reads the same as a missing field
    blank_nulls = field_validator("remote_url", "auth_token", mode="before")(_null_to_empty)


class TaskDTO(BaseModel):
    """JSON shape of a task, shared by the HTTP API and the tasks file."""
    model_config = ConfigDict(extra="ignore")

    id: str = ""
    name: str = ""
    schedule: str = ""
    type: str = ""
    payload: str = ""
    config: Optional[TaskConfigDTO] = None

    blank_nulls = field_validator("id", "name", "schedule", "type", "payload", mode="before")(
        _null_to_empty
    )


TaskListAdapter = TypeAdapter(list[TaskDTO])
