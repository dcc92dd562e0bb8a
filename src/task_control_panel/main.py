from task_control_panel.infrastructure.configuration.main_settings import Settings
from task_control_panel.infrastructure.entrypoints.api.app_factory import create_app

# Instantiate global app for ASGI (`uvicorn task_control_panel.main:app`)
settings = Settings()
app = create_app(settings)
