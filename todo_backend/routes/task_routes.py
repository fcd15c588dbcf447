import logging

from flask import Blueprint, jsonify, request

from todo_backend.errors import NotFound
from todo_backend.models.task_model import parse_task_payload
from todo_backend.utils.db import get_task_store

logger = logging.getLogger(__name__)

tasks_bp = Blueprint("todos", __name__)


@tasks_bp.get("")
def list_tasks():
    tasks = get_task_store().find_all()
    logger.info("listed todos", extra={"count": len(tasks)})
    return jsonify([t.to_json() for t in tasks]), 200


@tasks_bp.post("")
def create_task():
    fields = parse_task_payload(request.get_json(silent=True))
    task = get_task_store().insert(fields)
    logger.info("created todo", extra={"task_id": task.id})
    return jsonify(task.to_json()), 201


@tasks_bp.put("/<task_id>")
def update_task(task_id):
    fields = parse_task_payload(request.get_json(silent=True))
    task = get_task_store().replace(task_id, fields)
    if task is None:
        raise NotFound("Todo not found")
    logger.info("updated todo", extra={"task_id": task.id})
    return jsonify(task.to_json()), 200


@tasks_bp.delete("/<task_id>")
def delete_task(task_id):
    # Deleting an unknown id is still a success; the end state is the same.
    deleted = get_task_store().delete(task_id)
    logger.info("deleted todo", extra={"task_id": task_id, "found": deleted})
    return "", 204
