"""Database models."""

from todo_list.models.task import Priority, SubTask, Task


__all__ = ["Priority", "Task", "SubTask"]
