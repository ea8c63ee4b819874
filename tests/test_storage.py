import json

import pytest

from errors import StoreWriteError
from models import Task
from storage import TaskStore


def test_load_missing_file_is_empty(store, task_file):
    assert not task_file.exists()
    assert store.load() == []


@pytest.mark.parametrize("content", ["", "   \n", "{not json", "[1, 2", "null", '{"description": "x"}', "[" * 200000 + "]" * 200000])
def test_load_unusable_content_is_empty(store, task_file, content):
    task_file.write_text(content, encoding="utf-8")
    assert store.load() == []


def test_load_invalid_utf8_is_empty(store, task_file):
    task_file.write_bytes(b"\xff\xfe\xfa[]")
    assert store.load() == []


def test_load_skips_malformed_records(store, write_tasks):
    write_tasks([{"description": "a"}, "junk", {"completed": True}, {"description": "b", "completed": True}])
    assert store.load() == [Task("a"), Task("b", True)]


def test_save_writes_pretty_json_array(store, task_file):
    store.save([Task("Buy milk", False), Task("Old", None)])
    text = task_file.read_text(encoding="utf-8")
    assert json.loads(text) == [{"description": "Buy milk", "completed": False}, {"description": "Old"}]
    assert text.startswith('[\n  {\n    "description": "Buy milk",')


def test_save_keeps_non_ascii_readable(store, task_file):
    store.save([Task("Comprar café", False)])
    assert "café" in task_file.read_text(encoding="utf-8")


def test_save_then_load_round_trip(store):
    tasks = [Task("one", False), Task("two", True), Task("legacy"), Task("tagged", False, {"tag": "x"})]
    store.save(tasks)
    assert store.load() == tasks
    store.save(store.load())
    assert store.load() == tasks


def test_save_creates_parent_directory(tmp_path):
    store = TaskStore(tmp_path / "nested" / "task.json")
    store.save([Task("x", False)])
    assert store.load() == [Task("x", False)]


def test_save_failure_raises_store_write_error(tmp_path):
    target = tmp_path / "task.json"
    target.mkdir()
    store = TaskStore(target)
    with pytest.raises(StoreWriteError) as excinfo:
        store.save([Task("x", False)])
    assert excinfo.value.path == target
    assert isinstance(excinfo.value.cause, OSError)
    assert "Error saving tasks" in str(excinfo.value)


def test_default_path_is_task_json_in_working_directory():
    assert TaskStore().path.as_posix() == "task.json"
