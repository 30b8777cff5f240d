"""API route blueprints."""

from todo_list.routes.health import health_bp
from todo_list.routes.sub_tasks import sub_tasks_bp
from todo_list.routes.tasks import tasks_bp


__all__ = ["health_bp", "tasks_bp", "sub_tasks_bp"]
