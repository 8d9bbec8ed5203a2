"""Teamboard Database Models"""
from teamboard.models.user import User
from teamboard.models.workspace import Workspace
from teamboard.models.workspace_member import WorkspaceMember, MemberRole
from teamboard.models.project import Project
from teamboard.models.board_column import BoardColumn, ColumnName
from teamboard.models.task import Task, Priority

__all__ = [
    "User",
    "Workspace",
    "WorkspaceMember",
    "MemberRole",
    "Project",
    "BoardColumn",
    "ColumnName",
    "Task",
    "Priority",
]
