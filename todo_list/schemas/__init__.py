"""Marshmallow schemas for serialization and validation."""

from todo_list.schemas.task import NestedSubTaskSchema, SubTaskSchema, TaskSchema


__all__ = [
    "TaskSchema",
    "SubTaskSchema",
    "NestedSubTaskSchema",
]
