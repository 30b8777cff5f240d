"""Explicit mapping from validated payloads to models.

Payloads are the dicts produced by ``TaskSchema().load`` and
``SubTaskSchema().load``. Timestamps are normalized to naive UTC.
"""

from typing import Any

from todo_list.clock import to_utc_naive
from todo_list.models import Priority, SubTask, Task


def _optional_timestamp(value):
    return to_utc_naive(value) if value is not None else None


def task_from_payload(
    data: dict[str, Any], task_id: int | None = None, with_sub_tasks: bool = True
) -> Task:
    """Build a transient Task from a loaded task payload.

    Args:
        data: Loaded task payload.
        task_id: Id to give the task; None lets the database assign one.
        with_sub_tasks: Whether to map nested sub-tasks as well.

    Returns:
        Task not yet attached to any session.
    """
    task = Task(
        id=task_id,
        title=data["title"],
        description=data.get("description"),
        is_completed=data.get("is_completed", False),
        due_date=to_utc_naive(data["due_date"]),
        created_at=to_utc_naive(data["created_at"]),
        updated_at=_optional_timestamp(data.get("updated_at")),
        priority=data.get("priority", Priority.LOW),
    )
    if with_sub_tasks:
        task.sub_tasks = [sub_task_from_payload(item) for item in data.get("sub_tasks") or []]
    return task


def sub_task_from_payload(data: dict[str, Any], sub_task_id: int | None = None) -> SubTask:
    """Build a transient SubTask from a loaded sub-task payload.

    ``task_id`` is taken from the payload when present; nested sub-tasks get
    theirs from the owning task on flush.
    """
    return SubTask(
        id=sub_task_id,
        task_id=data.get("task_id"),
        title=data["title"],
        description=data.get("description"),
        is_completed=data.get("is_completed", False),
        due_date=to_utc_naive(data["due_date"]),
        created_at=to_utc_naive(data["created_at"]),
        updated_at=_optional_timestamp(data.get("updated_at")),
        priority=data.get("priority", Priority.LOW),
    )
