"""Repositories: the only code that talks to the database session."""

from todo_list.repositories.sub_task import SubTaskRepository
from todo_list.repositories.task import TaskRepository


__all__ = ["TaskRepository", "SubTaskRepository"]
