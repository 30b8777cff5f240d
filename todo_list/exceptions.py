"""Domain exceptions raised by repositories and services."""


class NotFoundError(Exception):
    """An operation targeted an id with no matching row."""

    entity = "Entity"

    def __init__(self, entity_id: int) -> None:
        self.entity_id = entity_id
        super().__init__(f"{self.entity} with ID {entity_id} not found.")


class TaskNotFoundError(NotFoundError):
    entity = "Task"


class SubTaskNotFoundError(NotFoundError):
    entity = "SubTask"
