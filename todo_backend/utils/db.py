import logging

from bson import ObjectId
from bson.errors import InvalidId
from flask import current_app
from pymongo import MongoClient

logger = logging.getLogger(__name__)

STORE_KEY = "task_store"


def to_object_id(value):
    """Parse a path id into an ObjectId, or None when it is malformed."""
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


def connect(app):
    """Open the MongoDB client for ``app`` and return the tasks collection."""
    client = MongoClient(
        app.config["MONGO_URI"],
        serverSelectionTimeoutMS=app.config["MONGO_TIMEOUT_MS"],
    )
    db = client[app.config["MONGO_DB_NAME"]]
    logger.info(
        "mongo client configured",
        extra={"db": app.config["MONGO_DB_NAME"], "collection": app.config["MONGO_COLLECTION"]},
    )
    return db[app.config["MONGO_COLLECTION"]]


def init_app(app, task_store=None):
    """Attach the task store to ``app``, building a Mongo-backed one if none is given."""
    if task_store is None:
        from todo_backend.models.task_store import MongoTaskStore

        task_store = MongoTaskStore(connect(app))
    app.extensions[STORE_KEY] = task_store
    return task_store


def get_task_store():
    return current_app.extensions[STORE_KEY]

