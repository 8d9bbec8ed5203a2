"""Business operations, one module per aggregate."""

from . import auth, board_columns, members, projects, tasks, users, workspaces

__all__ = ["auth", "board_columns", "members", "projects", "tasks", "users", "workspaces"]
