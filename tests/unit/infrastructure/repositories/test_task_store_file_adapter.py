import json
import os
from unittest.mock import patch

import pytest

from task_control_panel.application.core.domain.entities.task import Task, TaskConfig
from task_control_panel.application.core.domain.exceptions.persistence_error import (
    PersistenceError,
)
from task_control_panel.infrastructure.repositories.task_store_file_adapter import (
    TaskStoreFileAdapter,
)


@pytest.fixture
def tasks_file(tmp_path):
    return tmp_path / "tasks.json"


def test_missing_file_loads_empty(tasks_file):
    assert TaskStoreFileAdapter(tasks_file).load() == []


@pytest.mark.parametrize(
    "content",
    [
        "",
        "{not json",
        '{"id": "a"}',
        '[{"id": 42}]',
        "null",
    ],
)
def test_unusable_file_loads_empty(tasks_file, content):
    tasks_file.write_text(content, encoding="utf-8")

    assert TaskStoreFileAdapter(tasks_file).load() == []


def test_round_trip_preserves_order_and_fields(tasks_file):
    tasks = [
        Task(id="t2", name="second", schedule="23:59", type="command", payload="echo hi"),
        Task(id="t1", name="ping", schedule="09:30", type="http_check"),
        Task(
            id="cfg",
            name="rotate",
            schedule="00:00",
            type="update_config",
            config=TaskConfig(remote_url="https://panel.example.com", auth_token="s3cr3t"),
        ),
    ]

    TaskStoreFileAdapter(tasks_file).save(tasks)
    reloaded = TaskStoreFileAdapter(tasks_file).load()

    assert reloaded == tasks


def test_file_is_indented_and_omits_empty_optionals(tasks_file):
    TaskStoreFileAdapter(tasks_file).save([Task(id="t1", name="ping", schedule="09:30", type="http_check")])

    raw = tasks_file.read_text(encoding="utf-8")
    assert raw.startswith("[\n  {")
    assert json.loads(raw) == [
        {"id": "t1", "name": "ping", "schedule": "09:30", "type": "http_check"}
    ]


def test_non_ascii_text_is_kept_readable(tasks_file):
    TaskStoreFileAdapter(tasks_file).save([Task(id="t1", name="每日备份")])

    assert "每日备份" in tasks_file.read_text(encoding="utf-8")


def test_save_creates_parent_directories(tmp_path):
    target = tmp_path / "nested" / "dir" / "tasks.json"

    TaskStoreFileAdapter(target).save([Task(id="a")])

    assert json.loads(target.read_text(encoding="utf-8"))[0]["id"] == "a"


def test_save_leaves_no_temp_files(tasks_file):
    adapter = TaskStoreFileAdapter(tasks_file)
    adapter.save([Task(id="a")])
    adapter.save([Task(id="b")])

    assert sorted(os.listdir(tasks_file.parent)) == ["tasks.json"]


def test_failed_replace_raises_and_keeps_previous_file(tasks_file):
    adapter = TaskStoreFileAdapter(tasks_file)
    adapter.save([Task(id="original")])

    with patch(
        "task_control_panel.infrastructure.repositories.task_store_file_adapter.os.replace",
        side_effect=OSError("No space left on device"),
    ):
        with pytest.raises(PersistenceError) as exc:
            adapter.save([Task(id="new")])

    assert "No space left on device" in exc.value.message
    assert exc.value.path == str(tasks_file)
    assert [t.id for t in adapter.load()] == ["original"]
    assert sorted(os.listdir(tasks_file.parent)) == ["tasks.json"]
