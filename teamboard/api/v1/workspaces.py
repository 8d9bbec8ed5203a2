"""Workspace and workspace member endpoints"""
import logging
from typing import List

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from teamboard import models, schemas
from teamboard.database import get_db
from teamboard.dependencies import get_current_user
from teamboard.exceptions import Forbidden
from teamboard.services import members, workspaces
from teamboard.api.v1.serializers import serialize_member, serialize_workspace

logger = logging.getLogger("teamboard.api.workspaces")

router = APIRouter(tags=["workspaces"])


def _ensure_owner(workspace: models.Workspace, current_user: models.User, action: str) -> None:
    if workspace.owner_id != current_user.id:
        logger.warning(f"User {current_user.id} tried to {action} in workspace {workspace.id}")
        raise Forbidden(f"Only workspace owner can {action}")


@router.post("", response_model=schemas.WorkspaceResponse, status_code=status.HTTP_201_CREATED)
def create_workspace(
    workspace_in: schemas.WorkspaceCreate,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Create a workspace owned by the caller, who also becomes its ADMIN member."""
    workspace = workspaces.create_workspace(db, workspace_in.name, workspace_in.description, current_user)
    return serialize_workspace(workspace)


@router.get("", response_model=List[schemas.WorkspaceResponse])
def list_workspaces(
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Workspaces the caller owns or is a member of."""
    return [serialize_workspace(w) for w in workspaces.list_accessible_to_user(db, current_user.id)]


@router.get("/search", response_model=List[schemas.WorkspaceResponse])
def search_workspaces(
    name: str = Query("", description="Case-insensitive substring of the workspace name"),
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    found = workspaces.search_accessible_by_name(db, current_user.id, name)
    return [serialize_workspace(w) for w in found]


@router.get("/owner/{owner_id}", response_model=List[schemas.WorkspaceResponse])
def list_workspaces_by_owner(
    owner_id: int,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    owned = workspaces.list_by_owner(db, owner_id)
    return [serialize_workspace(w) for w in owned if members.is_authorized(db, current_user, w)]


@router.get("/{workspace_id}", response_model=schemas.WorkspaceResponse)
def get_workspace(
    workspace_id: int,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    workspace = workspaces.get_workspace(db, workspace_id)
    members.ensure_workspace_access(db, current_user, workspace)
    return serialize_workspace(workspace)


@router.put("/{workspace_id}", response_model=schemas.WorkspaceResponse)
def update_workspace(
    workspace_id: int,
    workspace_in: schemas.WorkspaceUpdate,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    workspace = workspaces.update_workspace(
        db, workspace_id, workspace_in.name, workspace_in.description, current_user
    )
    return serialize_workspace(workspace)


@router.delete("/{workspace_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_workspace(
    workspace_id: int,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    workspaces.delete_workspace(db, workspace_id, current_user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Workspace member endpoints

@router.get("/{workspace_id}/members", response_model=List[schemas.WorkspaceMemberResponse])
def list_workspace_members(workspace_id: int, db: Session = Depends(get_db)):
    """List the members of a workspace. No authentication is required."""
    return [serialize_member(m) for m in members.list_members(db, workspace_id)]


@router.post(
    "/{workspace_id}/members",
    response_model=schemas.WorkspaceMemberResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_workspace_member(
    workspace_id: int,
    member_in: schemas.WorkspaceMemberCreate,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Add a user to the workspace (owner only).

    - **user_id**: user to add
    - **role**: ADMIN, MEMBER or VIEWER (default MEMBER)
    """
    workspace = workspaces.get_workspace(db, workspace_id)
    _ensure_owner(workspace, current_user, "add members")
    member = members.add_member(db, member_in.user_id, workspace_id, member_in.role)
    return serialize_member(member)


@router.put("/{workspace_id}/members/{user_id}", response_model=schemas.WorkspaceMemberResponse)
def update_workspace_member(
    workspace_id: int,
    user_id: int,
    member_update: schemas.WorkspaceMemberUpdate,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    workspace = workspaces.get_workspace(db, workspace_id)
    _ensure_owner(workspace, current_user, "change member roles")
    member = members.update_member_role(db, user_id, workspace_id, member_update.role)
    return serialize_member(member)


@router.delete("/{workspace_id}/members/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_workspace_member(
    workspace_id: int,
    user_id: int,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    workspace = workspaces.get_workspace(db, workspace_id)
    _ensure_owner(workspace, current_user, "remove members")
    members.remove_member(db, user_id, workspace_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
