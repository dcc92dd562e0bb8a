from task_control_panel.application.core.domain.entities.task import Task, TaskConfig
from task_control_panel.infrastructure.common.dtos.task_dto import TaskDTO
from task_control_panel.infrastructure.common.mappers.task_mapper import TaskMapper


def test_missing_fields_default_to_empty_strings():
    task = TaskMapper.to_domain(TaskDTO.model_validate({"id": "a"}))

    assert task == Task(id="a", name="", schedule="", type="", payload="", config=None)


def test_null_fields_default_to_empty_strings():
    dto = TaskDTO.model_validate({"id": None, "schedule": None, "config": {"auth_token": None}})

    assert TaskMapper.to_domain(dto) == Task(id="", schedule="", config=TaskConfig())


def test_unknown_keys_are_ignored():
    dto = TaskDTO.model_validate({"id": "a", "priority": 5, "config": {"remote_url": "u", "x": 1}})

    assert TaskMapper.to_domain(dto) == Task(id="a", config=TaskConfig(remote_url="u"))


def test_json_dict_omits_empty_payload_and_absent_config():
    data = TaskMapper.to_json_dict(Task(id="a", name="n", schedule="01:02", type="t"))

    assert data == {"id": "a", "name": "n", "schedule": "01:02", "type": "t"}


def test_json_dict_keeps_payload_and_full_config():
    task = Task(
        id="a",
        type="update_config",
        payload="p",
        config=TaskConfig(remote_url="https://new.example.com"),
    )

    data = TaskMapper.to_json_dict(task)

    assert data["payload"] == "p"
    assert data["config"] == {"remote_url": "https://new.example.com", "auth_token": ""}
