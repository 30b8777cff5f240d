"""Task persistence."""

import logging

from sqlalchemy.orm import Query, Session, selectinload

from todo_list.clock import Clock, to_utc_naive
from todo_list.date_ranges import TaskRange, due_within, window_for
from todo_list.exceptions import TaskNotFoundError
from todo_list.models import Task


logger = logging.getLogger(__name__)


class TaskRepository:
    """Reads and writes tasks, always loading their sub-tasks."""

    def __init__(self, session: Session, clock: Clock) -> None:
        self.session = session
        self.clock = clock

    def _with_sub_tasks(self) -> Query:
        return self.session.query(Task).options(selectinload(Task.sub_tasks)).order_by(Task.id)

    def get_all(self, is_completed: bool | None = None) -> list[Task]:
        """Return all tasks, optionally only those with the given completion state."""
        query = self._with_sub_tasks()
        if is_completed is not None:
            query = query.filter(Task.is_completed == is_completed)
        return query.all()

    def get_by_id(self, task_id: int) -> Task | None:
        return self._with_sub_tasks().filter(Task.id == task_id).one_or_none()

    def add(self, task: Task) -> Task:
        self.session.add(task)
        self.session.commit()
        logger.debug(f"Task stored: {task.id}")
        return task

    def update(self, task: Task) -> Task:
        """Overwrite the mutable fields of an existing task.

        Only title, description, completion state and priority are copied;
        due date and creation time stay as stored. ``updated_at`` is always
        stamped with the clock, whatever the caller sent.

        Raises:
            TaskNotFoundError: If no task has ``task.id``.
        """
        existing = self.session.get(Task, task.id)
        if existing is None:
            raise TaskNotFoundError(task.id)

        existing.title = task.title
        existing.description = task.description
        existing.is_completed = task.is_completed
        existing.priority = task.priority
        existing.updated_at = to_utc_naive(self.clock.now())

        self.session.commit()
        return existing

    def delete(self, task_id: int) -> int | None:
        """Delete a task and return its id, or None if there was nothing to delete."""
        task = self.session.get(Task, task_id)
        if task is None:
            return None
        self.session.delete(task)
        self.session.commit()
        return task_id

    def exists(self, task_id: int) -> bool:
        return self.session.get(Task, task_id) is not None

    def get_in_range(self, task_range: TaskRange) -> list[Task]:
        window = window_for(task_range, self.clock.now())
        logger.debug(f"Querying tasks {task_range.value}: {window.start} .. {window.end}")
        return self._with_sub_tasks().filter(due_within(Task.due_date, window)).all()

    def get_for_today(self) -> list[Task]:
        return self.get_in_range(TaskRange.TODAY)

    def get_for_tomorrow(self) -> list[Task]:
        return self.get_in_range(TaskRange.TOMORROW)

    def get_for_this_week(self) -> list[Task]:
        return self.get_in_range(TaskRange.WEEK)
