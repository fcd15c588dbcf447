from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from bson import ObjectId

from todo_backend.errors import ValidationError

ALERT_FIELDS = ("date", "time", "phone")


@dataclass
class Alert:
    date: str  # YYYY-MM-DD
    time: str  # HH:MM
    phone: str

    def to_dict(self):
        return {"date": self.date, "time": self.time, "phone": self.phone}


@dataclass
class Task:
    id: str
    title: str
    created_at: Optional[datetime]
    updated_at: Optional[datetime]
    description: Optional[str] = None
    alert: Optional[Alert] = None

    @classmethod
    def from_document(cls, doc):
        """Build a Task from a stored document.

        Timestamps are stored as ``createdAt``/``updatedAt``, the same keys the
        mongoose schema used, so records it wrote load too. A stored alert that
        lacks any of date, time or phone is treated as absent.
        """
        alert = doc.get("alert")
        if not isinstance(alert, dict) or not all(alert.get(k) for k in ALERT_FIELDS):
            alert = None
        created_at = doc.get("createdAt")
        if created_at is None and isinstance(doc["_id"], ObjectId):
            created_at = doc["_id"].generation_time
        return cls(
            id=str(doc["_id"]),
            title=doc.get("title") or "",
            description=doc.get("description"),
            alert=Alert(**{k: alert[k] for k in ALERT_FIELDS}) if alert else None,
            created_at=created_at,
            updated_at=doc.get("updatedAt") or created_at,
        )

    def to_json(self):
        data = {"id": self.id, "title": self.title}
        if self.description is not None:
            data["description"] = self.description
        if self.alert is not None:
            data["alert"] = self.alert.to_dict()
        data["createdAt"] = _isoformat(self.created_at)
        data["updatedAt"] = _isoformat(self.updated_at)
        return data


def _isoformat(value):
    if value is None:
        return None
    # pymongo hands back naive datetimes that are already UTC
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.isoformat(timespec="milliseconds") + "Z"


def parse_task_payload(payload):
    """Validate a create/update body and return the fields to store.

    The result always carries ``title`` and only carries ``description`` and
    ``alert`` when the client supplied them, so an update replaces the whole
    record. An alert must have all of date, time and phone or none at all.
    """
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object.")

    title = payload.get("title")
    if not isinstance(title, str) or not title.strip():
        raise ValidationError("Title is required.")
    fields = {"title": title}

    description = payload.get("description")
    if description is not None:
        if not isinstance(description, str):
            raise ValidationError("Description must be text.")
        fields["description"] = description

    alert = payload.get("alert")
    if alert is not None:
        if not isinstance(alert, dict) or not all(
            isinstance(alert.get(name), str) and alert.get(name) for name in ALERT_FIELDS
        ):
            raise ValidationError("Alert must have date, time, and phone.")
        fields["alert"] = {name: alert[name] for name in ALERT_FIELDS}

    return fields
