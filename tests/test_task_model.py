from datetime import datetime, timezone

import pytest
from bson import ObjectId

from todo_backend.errors import ValidationError
from todo_backend.models.task_model import Alert, Task, parse_task_payload


def test_parse_keeps_only_supplied_fields():
    assert parse_task_payload({"title": "Buy milk"}) == {"title": "Buy milk"}
    assert parse_task_payload({"title": "a", "description": "b", "extra": 1}) == {
        "title": "a",
        "description": "b",
    }


def test_parse_drops_unknown_alert_keys():
    fields = parse_task_payload(
        {"title": "a", "alert": {"date": "2024-01-01", "time": "08:00", "phone": "1", "x": 2}}
    )
    assert fields["alert"] == {"date": "2024-01-01", "time": "08:00", "phone": "1"}


@pytest.mark.parametrize(
    "payload",
    [
        None,
        [],
        {"title": ""},
        {"title": 5},
        {"title": "a", "description": 3},
        {"title": "a", "alert": "tomorrow"},
        {"title": "a", "alert": {"date": "2024-01-01", "time": "", "phone": "1"}},
    ],
)
def test_parse_rejects(payload):
    with pytest.raises(ValidationError):
        parse_task_payload(payload)


def test_from_document_and_json():
    oid = ObjectId()
    created = datetime(2024, 1, 1, 12, 0, 0, 123000)
    task = Task.from_document(
        {
            "_id": oid,
            "title": "Call dentist",
            "alert": {"date": "2024-01-02", "time": "09:00", "phone": "555"},
            "createdAt": created,
            "updatedAt": created,
        }
    )
    assert task.alert == Alert("2024-01-02", "09:00", "555")
    assert task.to_json() == {
        "id": str(oid),
        "title": "Call dentist",
        "alert": {"date": "2024-01-02", "time": "09:00", "phone": "555"},
        "createdAt": "2024-01-01T12:00:00.123Z",
        "updatedAt": "2024-01-01T12:00:00.123Z",
    }


def test_aware_timestamps_render_as_utc():
    moment = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
    task = Task(id="1", title="t", created_at=moment, updated_at=moment)
    assert task.to_json()["createdAt"] == "2024-01-01T12:00:00.000Z"
