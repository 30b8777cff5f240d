"""SubTask persistence."""

from sqlalchemy.orm import Session

from todo_list.clock import Clock, to_utc_naive
from todo_list.exceptions import SubTaskNotFoundError
from todo_list.models import SubTask


class SubTaskRepository:
    def __init__(self, session: Session, clock: Clock) -> None:
        self.session = session
        self.clock = clock

    def get_all_by_task_id(self, task_id: int) -> list[SubTask]:
        """Sub-tasks of a task in insertion order; empty for unknown ids."""
        return (
            self.session.query(SubTask)
            .filter(SubTask.task_id == task_id)
            .order_by(SubTask.id)
            .all()
        )

    def get_by_id(self, sub_task_id: int) -> SubTask | None:
        return self.session.get(SubTask, sub_task_id)

    def add(self, sub_task: SubTask) -> SubTask:
        self.session.add(sub_task)
        self.session.commit()
        return sub_task

    def update(self, sub_task: SubTask) -> SubTask:
        """Overwrite mutable fields; the owning task never changes.

        Raises:
            SubTaskNotFoundError: If no sub-task has ``sub_task.id``.
        """
        existing = self.session.get(SubTask, sub_task.id)
        if existing is None:
            raise SubTaskNotFoundError(sub_task.id)

        existing.title = sub_task.title
        existing.description = sub_task.description
        existing.is_completed = sub_task.is_completed
        existing.priority = sub_task.priority
        existing.updated_at = to_utc_naive(self.clock.now())

        self.session.commit()
        return existing

    def delete(self, sub_task_id: int) -> int | None:
        sub_task = self.session.get(SubTask, sub_task_id)
        if sub_task is None:
            return None
        self.session.delete(sub_task)
        self.session.commit()
        return sub_task_id
