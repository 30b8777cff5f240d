"""SubTask CRUD endpoints."""

import logging

from flask import Blueprint, jsonify, request
from marshmallow import ValidationError

from todo_list.errors import error_response
from todo_list.routes.params import int_arg
from todo_list.schemas import SubTaskSchema
from todo_list.services import get_sub_task_service
from todo_list.telemetry import get_meter, get_tracer


logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)
meter = get_meter(__name__)

sub_tasks_created = meter.create_counter(
    name="sub_tasks.created",
    description="Sub-tasks created",
    unit="1",
)

sub_tasks_bp = Blueprint("sub_tasks", __name__, url_prefix="/api/todo-list/sub-task")


@sub_tasks_bp.route("", methods=["GET"])
def list_sub_tasks():
    """List the sub-tasks of a task; unknown ids give an empty list."""
    sub_tasks = get_sub_task_service().get_all_by_task_id(int_arg("taskId"))
    return SubTaskSchema(many=True).jsonify(sub_tasks)


@sub_tasks_bp.route("", methods=["POST"])
def create_sub_task():
    """Create a sub-task under an existing task.

    Returns:
        JSON sub-task, 400 on validation failure, 404 if the task is unknown.
    """
    with tracer.start_as_current_span("sub_task.create") as span:
        try:
            data = SubTaskSchema().load(request.get_json() or {})
        except ValidationError as err:
            return jsonify(err.messages), 400

        span.set_attribute("task.id", data["task_id"])
        sub_task = get_sub_task_service().add(data)

        span.set_attribute("sub_task.id", sub_task.id)
        sub_tasks_created.add(1)
        logger.info(f"SubTask created: {sub_task.id}", extra={"task_id": sub_task.task_id})

        return SubTaskSchema().jsonify(sub_task)


@sub_tasks_bp.route("/<int:sub_task_id>", methods=["PUT"])
def update_sub_task(sub_task_id: int):
    with tracer.start_as_current_span("sub_task.update") as span:
        try:
            data = SubTaskSchema().load(request.get_json() or {})
        except ValidationError as err:
            return jsonify(err.messages), 400

        if data["id"] != sub_task_id:
            return error_response("Route ID does not match sub-task ID", 400)

        sub_task = get_sub_task_service().update(data)

        span.set_attribute("sub_task.id", sub_task.id)
        logger.info(f"SubTask updated: {sub_task.id}")

        return SubTaskSchema().jsonify(sub_task)


@sub_tasks_bp.route("", methods=["DELETE"])
def delete_sub_task():
    with tracer.start_as_current_span("sub_task.delete"):
        deleted_id = get_sub_task_service().delete(int_arg("id"))
        if deleted_id is None:
            return error_response("SubTask not found", 404)

        logger.info(f"SubTask deleted: {deleted_id}")
        return jsonify(deleted_id)
