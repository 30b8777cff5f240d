"""Service modules."""

from flask import current_app

from todo_list.extensions import db
from todo_list.repositories import SubTaskRepository, TaskRepository
from todo_list.services.tasks import SubTaskService, TaskService


def get_task_service() -> TaskService:
    """TaskService bound to the current app's session and clock."""
    return TaskService(TaskRepository(db.session, current_app.extensions["clock"]))


def get_sub_task_service() -> SubTaskService:
    """SubTaskService bound to the current app's session and clock."""
    clock = current_app.extensions["clock"]
    return SubTaskService(
        SubTaskRepository(db.session, clock),
        TaskRepository(db.session, clock),
    )


__all__ = ["TaskService", "SubTaskService", "get_task_service", "get_sub_task_service"]
