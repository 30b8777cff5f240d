"""Task CRUD and date-range endpoints."""

import logging

from flask import Blueprint, jsonify, request
from marshmallow import ValidationError

from todo_list.date_ranges import TaskRange
from todo_list.errors import error_response
from todo_list.routes.params import completed_filter, int_arg
from todo_list.schemas import TaskSchema
from todo_list.services import get_task_service
from todo_list.telemetry import get_meter, get_tracer


logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)
meter = get_meter(__name__)

tasks_created = meter.create_counter(
    name="tasks.created",
    description="Tasks created",
    unit="1",
)
tasks_deleted = meter.create_counter(
    name="tasks.deleted",
    description="Tasks deleted",
    unit="1",
)

tasks_bp = Blueprint("tasks", __name__, url_prefix="/api/todo-list/task")


@tasks_bp.route("", methods=["GET"])
def get_task():
    """Get a single task with its sub-tasks.

    Query params:
        id: Task id

    Returns:
        JSON task, or 404.
    """
    task = get_task_service().get_by_id(int_arg("id"))
    if task is None:
        return error_response("Task not found", 404)
    return TaskSchema().jsonify(task)


@tasks_bp.route("/all", methods=["GET"])
def list_tasks():
    """List all tasks.

    Query params:
        isCompleted: Optional ``true``/``false`` completion filter

    Returns:
        JSON array of tasks.
    """
    is_completed = completed_filter(request.args.get("isCompleted"))
    tasks = get_task_service().get_all(is_completed=is_completed)
    return TaskSchema(many=True).jsonify(tasks)


@tasks_bp.route("/all/<any(today, tomorrow, 'this-week'):period>", methods=["GET"])
def list_tasks_in_range(period: str):
    """List tasks due today, tomorrow or this week.

    ``isCompleted`` is ignored here: the range always wins.

    Args:
        period: One of ``today``, ``tomorrow``, ``this-week``.

    Returns:
        JSON array of tasks.
    """
    with tracer.start_as_current_span("task.list_range") as span:
        span.set_attribute("task.range", period)
        tasks = get_task_service().get_all(task_range=TaskRange(period))
        span.set_attribute("task.count", len(tasks))
        return TaskSchema(many=True).jsonify(tasks)


@tasks_bp.route("", methods=["POST"])
def create_task():
    """Create a task, including any nested sub-tasks.

    Returns:
        JSON response with created task.
    """
    with tracer.start_as_current_span("task.create") as span:
        try:
            data = TaskSchema().load(request.get_json() or {})
        except ValidationError as err:
            return jsonify(err.messages), 400

        task = get_task_service().add(data)

        span.set_attribute("task.id", task.id)
        tasks_created.add(1, {"priority": task.priority.name})
        logger.info(f"Task created: {task.id}", extra={"sub_tasks": len(task.sub_tasks)})

        return TaskSchema().jsonify(task)


@tasks_bp.route("/<int:task_id>", methods=["PUT"])
def update_task(task_id: int):
    """Update a task's title, description, completion state and priority.

    Args:
        task_id: Task id; must match ``id`` in the body.

    Returns:
        JSON response with updated task.
    """
    with tracer.start_as_current_span("task.update") as span:
        try:
            data = TaskSchema().load(request.get_json() or {})
        except ValidationError as err:
            return jsonify(err.messages), 400

        if data["id"] != task_id:
            span.set_attribute("task.status", "id_mismatch")
            return error_response("Route ID does not match task ID", 400)

        task = get_task_service().update(data)

        span.set_attribute("task.id", task.id)
        logger.info(f"Task updated: {task.id}")

        return TaskSchema().jsonify(task)


@tasks_bp.route("", methods=["DELETE"])
def delete_task():
    """Delete a task and its sub-tasks.

    Query params:
        id: Task id

    Returns:
        JSON deleted id, or 404.
    """
    with tracer.start_as_current_span("task.delete") as span:
        task_id = int_arg("id")
        span.set_attribute("task.id", task_id)

        deleted_id = get_task_service().delete(task_id)
        if deleted_id is None:
            return error_response("Task not found", 404)

        tasks_deleted.add(1)
        logger.info(f"Task deleted: {deleted_id}")

        return jsonify(deleted_id)
