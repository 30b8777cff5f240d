"""Task and SubTask services.

Thin layer between validated payloads and the repositories. Range requests
are routed to the date-bucket queries; when a range is given the completion
filter is ignored.
"""

from typing import Any

from todo_list.date_ranges import TaskRange
from todo_list.exceptions import TaskNotFoundError
from todo_list.mappers import sub_task_from_payload, task_from_payload
from todo_list.models import SubTask, Task
from todo_list.repositories import SubTaskRepository, TaskRepository


class TaskService:
    def __init__(self, repository: TaskRepository) -> None:
        self.repository = repository

    def get_all(
        self, task_range: TaskRange | None = None, is_completed: bool | None = None
    ) -> list[Task]:
        """List tasks for a named range, or all tasks filtered by completion.

        Args:
            task_range: Date bucket to select. Takes precedence over
                ``is_completed``.
            is_completed: Completion filter, applied only without a range.

        Returns:
            Matching tasks with their sub-tasks.
        """
        if task_range is TaskRange.TODAY:
            return self.repository.get_for_today()
        if task_range is TaskRange.TOMORROW:
            return self.repository.get_for_tomorrow()
        if task_range is TaskRange.WEEK:
            return self.repository.get_for_this_week()
        return self.repository.get_all(is_completed)

    def get_by_id(self, task_id: int) -> Task | None:
        return self.repository.get_by_id(task_id)

    def add(self, payload: dict[str, Any]) -> Task:
        return self.repository.add(task_from_payload(payload))

    def update(self, payload: dict[str, Any]) -> Task:
        """Apply an update payload to the task named by ``payload["id"]``.

        Raises:
            TaskNotFoundError: If the task does not exist.
        """
        task = task_from_payload(payload, task_id=payload["id"], with_sub_tasks=False)
        return self.repository.update(task)

    def delete(self, task_id: int) -> int | None:
        return self.repository.delete(task_id)


class SubTaskService:
    def __init__(self, repository: SubTaskRepository, task_repository: TaskRepository) -> None:
        self.repository = repository
        self.task_repository = task_repository

    def get_all_by_task_id(self, task_id: int) -> list[SubTask]:
        return self.repository.get_all_by_task_id(task_id)

    def add(self, payload: dict[str, Any]) -> SubTask:
        """Create a sub-task under an existing task.

        Raises:
            TaskNotFoundError: If ``payload["task_id"]`` names no task.
        """
        if not self.task_repository.exists(payload["task_id"]):
            raise TaskNotFoundError(payload["task_id"])
        return self.repository.add(sub_task_from_payload(payload))

    def update(self, payload: dict[str, Any]) -> SubTask:
        """Raises SubTaskNotFoundError if the sub-task does not exist."""
        sub_task = sub_task_from_payload(payload, sub_task_id=payload["id"])
        return self.repository.update(sub_task)

    def delete(self, sub_task_id: int) -> int | None:
        return self.repository.delete(sub_task_id)
