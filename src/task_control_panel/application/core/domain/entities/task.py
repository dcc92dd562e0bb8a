from dataclasses import dataclass
from typing import Optional


@dataclass
class TaskConfig:
    """
    Remote endpoint settings carried by configuration-update tasks.
    Has no lifecycle of its own; it only exists embedded in a Task.
    """
    remote_url: str = ""
    auth_token: str = ""


@dataclass
class Task:
    """
    A scheduled action consumed by the remote agent.
    - schedule: wall-clock "HH:MM" string, stored as given.
    - type: free-text discriminator, never interpreted by the store.
    - config: populated by convention when type is "update_config".
    """
    id: str = ""
    name: str = ""
    schedule: str = ""
    type: str = ""
    payload: str = ""
    config: Optional[TaskConfig] = None
