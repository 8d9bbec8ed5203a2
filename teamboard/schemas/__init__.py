"""
Pydantic schemas for request/response validation
"""
from teamboard.schemas.user import (
    UserCreate,
    UserLogin,
    UserUpdate,
    PasswordChange,
    UserSummary,
    UserResponse,
    Token,
    MessageResponse,
)
from teamboard.schemas.workspace import WorkspaceCreate, WorkspaceUpdate, WorkspaceResponse
from teamboard.schemas.workspace_member import (
    WorkspaceMemberCreate,
    WorkspaceMemberUpdate,
    WorkspaceMemberResponse,
)
from teamboard.schemas.project import ProjectCreate, ProjectUpdate, ProjectResponse
from teamboard.schemas.board_column import BoardColumnResponse
from teamboard.schemas.task import TaskCreate, TaskUpdate, TaskAssign, TaskResponse

__all__ = [
    "UserCreate",
    "UserLogin",
    "UserUpdate",
    "PasswordChange",
    "UserSummary",
    "UserResponse",
    "Token",
    "MessageResponse",
    "WorkspaceCreate",
    "WorkspaceUpdate",
    "WorkspaceResponse",
    "WorkspaceMemberCreate",
    "WorkspaceMemberUpdate",
    "WorkspaceMemberResponse",
    "ProjectCreate",
    "ProjectUpdate",
    "ProjectResponse",
    "BoardColumnResponse",
    "TaskCreate",
    "TaskUpdate",
    "TaskAssign",
    "TaskResponse",
]
