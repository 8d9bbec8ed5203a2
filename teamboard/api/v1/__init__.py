"""API routers for Teamboard."""

from . import auth, columns, projects, tasks, workspaces

__all__ = ["auth", "columns", "projects", "tasks", "workspaces"]
