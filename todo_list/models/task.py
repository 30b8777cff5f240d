"""Task and SubTask models."""

import enum
from datetime import datetime

from sqlalchemy import Enum, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from todo_list.extensions import db


class Priority(enum.IntEnum):
    """Task priority, serialized by value."""

    LOW = 0
    MEDIUM = 1
    HIGH = 2
    URGENT = 3


class Task(db.Model):
    """A to-do item with optional sub-tasks."""

    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(String(250), nullable=False)
    description: Mapped[str | None] = mapped_column(String(500))
    is_completed: Mapped[bool] = mapped_column(default=False, nullable=False)
    due_date: Mapped[datetime] = mapped_column(index=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(nullable=False)
    updated_at: Mapped[datetime | None] = mapped_column()
    priority: Mapped[Priority] = mapped_column(
        Enum(Priority, name="priority"), default=Priority.LOW, nullable=False
    )

    # Relationships
    sub_tasks: Mapped[list["SubTask"]] = relationship(
        "SubTask",
        back_populates="task",
        cascade="all, delete-orphan",
        order_by="SubTask.id",
    )

    def __repr__(self) -> str:
        return f"<Task {self.id} {self.title!r}>"


class SubTask(db.Model):
    """A step belonging to exactly one task."""

    __tablename__ = "sub_tasks"

    id: Mapped[int] = mapped_column(primary_key=True)
    task_id: Mapped[int] = mapped_column(
        ForeignKey("tasks.id", ondelete="CASCADE"), index=True, nullable=False
    )
    title: Mapped[str] = mapped_column(String(250), nullable=False)
    description: Mapped[str | None] = mapped_column(String(500))
    is_completed: Mapped[bool] = mapped_column(default=False, nullable=False)
    due_date: Mapped[datetime] = mapped_column(nullable=False)
    created_at: Mapped[datetime] = mapped_column(nullable=False)
    updated_at: Mapped[datetime | None] = mapped_column()
    priority: Mapped[Priority] = mapped_column(
        Enum(Priority, name="priority"), default=Priority.LOW, nullable=False
    )

    # Relationships
    task: Mapped["Task"] = relationship("Task", back_populates="sub_tasks")

    def __repr__(self) -> str:
        return f"<SubTask {self.id} task={self.task_id}>"
