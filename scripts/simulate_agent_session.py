import sys
import tempfile
from pathlib import Path

from fastapi.testclient import TestClient

# Add src to path
sys.path.append(str(Path(__file__).parent.parent / "src"))

from task_control_panel.infrastructure.configuration.main_settings import Settings
from task_control_panel.infrastructure.entrypoints.api.app_factory import create_app


def simulate():
    """Walks through what an operator and a polling agent do against a throwaway panel."""
    workdir = Path(tempfile.mkdtemp())
    settings = Settings(token="simulation-token", tasks_file=workdir / "tasks.json")
    client = TestClient(create_app(settings))
    headers = {"Authorization": "Bearer simulation-token"}

    print("Operator schedules two tasks...")
    client.post(
        "/api/tasks/add",
        json={"id": "t1", "name": "ping", "schedule": "09:30", "type": "http_check", "payload": "https://example.com"},
        headers=headers,
    )
    client.post(
        "/api/tasks/add",
        json={
            "id": "t2",
            "name": "move to new panel",
            "schedule": "03:00",
            "type": "update_config",
            "config": {"remote_url": "https://panel2.example.com", "auth_token": "next-token"},
        },
        headers=headers,
    )

    print("Agent polls the task list:")
    response = client.get("/api/tasks", headers=headers)
    print(f"Status Code: {response.status_code}")
    for task in response.json():
        print(f"  {task['schedule']}  {task['type']:<14} {task['name']}")

    print("Unauthenticated poll:")
    response = client.get("/api/tasks")
    print(f"Status Code: {response.status_code} {response.json()}")

    print(f"\nPersisted file ({settings.tasks_file}):")
    print(settings.tasks_file.read_text(encoding="utf-8"))


if __name__ == "__main__":
    simulate()
