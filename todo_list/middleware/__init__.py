"""Middleware modules."""

from todo_list.middleware.metrics import register_metrics_middleware


__all__ = ["register_metrics_middleware"]
