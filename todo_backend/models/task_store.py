import logging
from datetime import datetime, timezone

from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from todo_backend.errors import StoreError
from todo_backend.models.task_model import Task
from todo_backend.utils.db import to_object_id

logger = logging.getLogger(__name__)

REPLACEABLE_FIELDS = ("title", "description", "alert")


def _now():
    return datetime.now(timezone.utc)


class TaskStore:
    """Persistence operations the task routes rely on."""

    def insert(self, fields):
        raise NotImplementedError

    def find_all(self):
        raise NotImplementedError

    def replace(self, task_id, fields):
        """Replace title/description/alert; return None when ``task_id`` is unknown."""
        raise NotImplementedError

    def delete(self, task_id):
        """Remove the task; return whether anything was deleted."""
        raise NotImplementedError


class MongoTaskStore(TaskStore):
    def __init__(self, collection):
        self.collection = collection

    def insert(self, fields):
        now = _now()
        doc = dict(fields, createdAt=now, updatedAt=now)
        try:
            res = self.collection.insert_one(doc)
        except PyMongoError as exc:
            raise StoreError(str(exc)) from exc
        doc["_id"] = res.inserted_id
        return Task.from_document(doc)

    def find_all(self):
        try:
            return [Task.from_document(d) for d in self.collection.find()]
        except PyMongoError as exc:
            raise StoreError(str(exc)) from exc

    def replace(self, task_id, fields):
        oid = to_object_id(task_id)
        if oid is None:
            return None
        updates = {"$set": dict(fields, updatedAt=_now())}
        missing = [name for name in REPLACEABLE_FIELDS if name not in fields]
        if missing:
            updates["$unset"] = {name: "" for name in missing}
        try:
            doc = self.collection.find_one_and_update(
                {"_id": oid}, updates, return_document=ReturnDocument.AFTER
            )
        except PyMongoError as exc:
            raise StoreError(str(exc)) from exc
        return Task.from_document(doc) if doc else None

    def delete(self, task_id):
        oid = to_object_id(task_id)
        if oid is None:
            return False
        try:
            res = self.collection.delete_one({"_id": oid})
        except PyMongoError as exc:
            raise StoreError(str(exc)) from exc
        return res.deleted_count > 0
