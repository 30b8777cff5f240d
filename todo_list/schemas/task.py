"""Task and SubTask Marshmallow schemas.

JSON uses camelCase keys; attributes keep the model's snake_case names.
"""

from marshmallow import EXCLUDE, fields, validate

from todo_list.extensions import ma
from todo_list.models import Priority


TITLE_LENGTH = validate.Length(
    min=1, max=250, error="Title length should be between 1 and 250 characters"
)
# Regexp matches from the start of the value
TITLE_NOT_BLANK = validate.Regexp(r"\s*\S", error="Title is required")
DESCRIPTION_LENGTH = validate.Length(
    min=1, max=500, error="Description length should be between 1 and 500 characters"
)
ID_RANGE = validate.Range(min=-(2**31), max=2**31 - 1, error="Id is out of range.")


class _ItemSchema(ma.Schema):
    """Fields shared by tasks and sub-tasks."""

    class Meta:
        unknown = EXCLUDE

    id = fields.Int(load_default=None, validate=ID_RANGE)
    title = fields.Str(required=True, validate=[TITLE_LENGTH, TITLE_NOT_BLANK])
    description = fields.Str(allow_none=True, load_default=None, validate=DESCRIPTION_LENGTH)
    is_completed = fields.Bool(data_key="isCompleted", load_default=False)
    due_date = fields.DateTime(
        data_key="dueDate",
        format="iso",
        required=True,
        error_messages={"required": "DueDate is required"},
    )
    created_at = fields.DateTime(
        data_key="createdAt",
        format="iso",
        required=True,
        error_messages={"required": "CreatedAt is required"},
    )
    updated_at = fields.DateTime(
        data_key="updatedAt", format="iso", allow_none=True, load_default=None
    )
    priority = fields.Enum(
        Priority,
        by_value=fields.Integer,
        load_default=Priority.LOW,
        error_messages={"unknown": "Invalid priority."},
    )


class SubTaskSchema(_ItemSchema):
    """Schema for a standalone sub-task."""

    task_id = fields.Int(
        data_key="taskId",
        required=True,
        validate=validate.Range(
            min=1, max=2**31 - 1, error="TaskId must be a valid existing ID."
        ),
    )


class NestedSubTaskSchema(_ItemSchema):
    """Sub-task inside a task payload; the owning task is implied."""

    task_id = fields.Int(data_key="taskId", allow_none=True, load_default=None)


class TaskSchema(_ItemSchema):
    """Schema for a task and its sub-tasks."""

    sub_tasks = fields.List(
        fields.Nested(NestedSubTaskSchema),
        data_key="subTasks",
        allow_none=True,
        load_default=list,
    )
