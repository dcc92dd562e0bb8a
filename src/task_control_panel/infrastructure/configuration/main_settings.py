from pathlib import Path
from typing import Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TOKEN = "secret123"


class Settings(BaseSettings):
    """
    Process-wide settings for the control panel.
    Values come from TASK_PANEL_* environment variables or .env; CLI flags override both.
    """
    app_name: str = "Task Control Panel"
    env: str = Field(default="local")
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = Field(default=8080, ge=1, le=65535)

    # Shared bearer secret; the default is a placeholder that operators must override
    token: SecretStr = SecretStr(DEFAULT_TOKEN)

    tasks_file: Path = Path("tasks.json")
    static_dir: Optional[Path] = None

    model_config = SettingsConfigDict(
        env_prefix="TASK_PANEL_",
        env_file=".env",
        extra="ignore",
    )

    @property
    def uses_default_token(self) -> bool:
        return self.token.get_secret_value() == DEFAULT_TOKEN
