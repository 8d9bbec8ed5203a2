"""Workspace lifecycle."""
import logging
from typing import Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from teamboard import models
from teamboard.exceptions import AlreadyMember, DuplicateName, Forbidden, NotFound, ValidationError
from teamboard.models import MemberRole
from teamboard.services import members

logger = logging.getLogger("teamboard.workspaces")


def _require_name(name: Optional[str]) -> str:
    if name is None or not name.strip():
        raise ValidationError("Workspace name is required")
    return name


def _ensure_owner(workspace: models.Workspace, caller: models.User, action: str) -> None:
    if workspace.owner_id != caller.id:
        logger.warning(f"User {caller.id} tried to {action} workspace {workspace.id} without owning it")
        raise Forbidden(f"Only workspace owner can {action} it")


def find_workspace(db: Session, workspace_id: int) -> Optional[models.Workspace]:
    return db.query(models.Workspace).filter(models.Workspace.id == workspace_id).first()


def get_workspace(db: Session, workspace_id: int) -> models.Workspace:
    workspace = find_workspace(db, workspace_id)
    if workspace is None:
        raise NotFound("Workspace not found")
    return workspace


def find_by_owner_and_name(db: Session, owner_id: int, name: str) -> Optional[models.Workspace]:
    return (
        db.query(models.Workspace)
        .filter(models.Workspace.owner_id == owner_id, models.Workspace.name == name)
        .first()
    )


def create_workspace(
    db: Session,
    name: Optional[str],
    description: Optional[str],
    owner: models.User,
) -> models.Workspace:
    """
    Create a workspace owned by ``owner``.

    The owner is added as an ADMIN member in the same transaction. If such
    a row somehow already exists the workspace is still created.

    Raises:
        ValidationError: blank name
        DuplicateName: the owner already has a workspace with this name
    """
    name = _require_name(name)
    if find_by_owner_and_name(db, owner.id, name) is not None:
        raise DuplicateName("Workspace with this name already exists")

    workspace = models.Workspace(name=name, description=description, owner=owner)
    db.add(workspace)
    db.flush()

    try:
        members.add_member(db, owner.id, workspace.id, MemberRole.ADMIN, commit=False)
    except AlreadyMember:
        pass

    db.commit()
    db.refresh(workspace)
    logger.info(f"Created workspace '{workspace.name}' (ID: {workspace.id}) for user {owner.id}")
    return workspace


def update_workspace(
    db: Session,
    workspace_id: int,
    name: Optional[str],
    description: Optional[str],
    caller: models.User,
) -> models.Workspace:
    workspace = get_workspace(db, workspace_id)
    _ensure_owner(workspace, caller, "update")
    name = _require_name(name)

    existing = find_by_owner_and_name(db, workspace.owner_id, name)
    if existing is not None and existing.id != workspace.id:
        raise DuplicateName("Workspace with this name already exists")

    workspace.name = name
    workspace.description = description
    db.commit()
    db.refresh(workspace)
    logger.debug(f"Updated workspace {workspace_id}")
    return workspace


def delete_workspace(db: Session, workspace_id: int, caller: models.User) -> None:
    """Delete a workspace together with its members, projects, columns and tasks."""
    workspace = get_workspace(db, workspace_id)
    _ensure_owner(workspace, caller, "delete")

    db.delete(workspace)
    db.commit()
    logger.info(f"Deleted workspace {workspace_id}")


def list_workspaces(db: Session) -> list[models.Workspace]:
    return db.query(models.Workspace).order_by(models.Workspace.id.asc()).all()


def list_by_owner(db: Session, owner_id: int) -> list[models.Workspace]:
    return (
        db.query(models.Workspace)
        .filter(models.Workspace.owner_id == owner_id)
        .order_by(models.Workspace.id.asc())
        .all()
    )


def search_by_name(db: Session, text: str) -> list[models.Workspace]:
    """Case-insensitive substring match on the workspace name. `%` and `_` match literally."""
    return (
        db.query(models.Workspace)
        .filter(models.Workspace.name.icontains(text or "", autoescape=True))
        .order_by(models.Workspace.id.asc())
        .all()
    )


def _accessible_filter(user_id: int):
    return or_(
        models.Workspace.owner_id == user_id,
        models.Workspace.members.any(models.WorkspaceMember.user_id == user_id),
    )


def list_accessible_to_user(db: Session, user_id: int) -> list[models.Workspace]:
    """Workspaces owned by the user plus those they are a member of, without duplicates."""
    return (
        db.query(models.Workspace)
        .filter(_accessible_filter(user_id))
        .order_by(models.Workspace.id.asc())
        .all()
    )


def search_accessible_by_name(db: Session, user_id: int, text: str) -> list[models.Workspace]:
    return (
        db.query(models.Workspace)
        .filter(_accessible_filter(user_id), models.Workspace.name.icontains(text or "", autoescape=True))
        .order_by(models.Workspace.id.asc())
        .all()
    )
