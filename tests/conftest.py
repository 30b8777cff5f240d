"""Pytest fixtures for Todo List application testing."""

import os
from datetime import datetime, timezone

import pytest


# Disable OpenTelemetry for tests
os.environ["OTEL_SDK_DISABLED"] = "true"


# Wednesday; its week runs Monday 2025-07-14 .. Sunday 2025-07-20
NOW = datetime(2025, 7, 16, 9, 30, tzinfo=timezone.utc)


class FixedClock:
    """Clock that always reports ``current``; tests may move it."""

    def __init__(self, current: datetime) -> None:
        self.current = current

    def now(self) -> datetime:
        return self.current


@pytest.fixture
def clock():
    return FixedClock(NOW)


@pytest.fixture
def app(clock):
    """Create test application."""
    from todo_list import create_app
    from todo_list.config import TestConfig

    app = create_app(TestConfig, clock=clock)

    yield app


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def db(app):
    """Create test database."""
    from todo_list.extensions import db as _db

    with app.app_context():
        _db.create_all()
        yield _db
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def task_repository(db, clock):
    from todo_list.repositories import TaskRepository

    return TaskRepository(db.session, clock)


@pytest.fixture
def sub_task_repository(db, clock):
    from todo_list.repositories import SubTaskRepository

    return SubTaskRepository(db.session, clock)


@pytest.fixture
def make_task(db):
    """Insert a task straight through the session."""
    from todo_list.models import Priority, Task

    def _make_task(title="Task", due_date=datetime(2025, 7, 16, 12, 0), **fields):
        task = Task(
            title=title,
            due_date=due_date,
            created_at=fields.pop("created_at", datetime(2025, 7, 1, 8, 0)),
            priority=fields.pop("priority", Priority.LOW),
            **fields,
        )
        db.session.add(task)
        db.session.commit()
        return task

    return _make_task


@pytest.fixture
def make_sub_task(db):
    """Insert a sub-task straight through the session."""
    from todo_list.models import SubTask

    def _make_sub_task(task_id, title="Step", **fields):
        sub_task = SubTask(
            task_id=task_id,
            title=title,
            due_date=fields.pop("due_date", datetime(2025, 7, 16, 12, 0)),
            created_at=fields.pop("created_at", datetime(2025, 7, 1, 8, 0)),
            **fields,
        )
        db.session.add(sub_task)
        db.session.commit()
        return sub_task

    return _make_sub_task
