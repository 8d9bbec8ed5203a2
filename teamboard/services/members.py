"""Workspace membership and the workspace access predicate."""
import logging
from typing import Optional

from sqlalchemy.orm import Session

from teamboard import models
from teamboard.exceptions import AlreadyMember, CannotRemoveOwner, Forbidden, NotFound
from teamboard.models import MemberRole
from teamboard.services import users

logger = logging.getLogger("teamboard.members")


def _require_workspace(db: Session, workspace_id: int) -> models.Workspace:
    workspace = db.query(models.Workspace).filter(models.Workspace.id == workspace_id).first()
    if workspace is None:
        raise NotFound(f"Workspace not found with id: {workspace_id}")
    return workspace


def get_member(db: Session, user_id: int, workspace_id: int) -> Optional[models.WorkspaceMember]:
    """Membership row for (user, workspace), or None. Never raises."""
    return (
        db.query(models.WorkspaceMember)
        .filter(
            models.WorkspaceMember.user_id == user_id,
            models.WorkspaceMember.workspace_id == workspace_id,
        )
        .first()
    )


def add_member(
    db: Session,
    user_id: int,
    workspace_id: int,
    role: Optional[MemberRole] = MemberRole.MEMBER,
    commit: bool = True,
) -> models.WorkspaceMember:
    """
    Add a user to a workspace.

    Args:
        db: Database session
        user_id: User to add
        workspace_id: Target workspace
        role: Membership role, MEMBER when omitted
        commit: Commit the transaction; pass False to only flush when the
            caller owns the transaction

    Raises:
        NotFound: if the user or the workspace does not exist
        AlreadyMember: if the user already has a membership row
    """
    user = users.get_user(db, user_id)
    workspace = _require_workspace(db, workspace_id)

    if get_member(db, user_id, workspace_id) is not None:
        raise AlreadyMember("User is already a member of this workspace")

    member = models.WorkspaceMember(
        user=user,
        workspace=workspace,
        role=role or MemberRole.MEMBER,
    )
    db.add(member)
    if commit:
        db.commit()
        db.refresh(member)
    else:
        db.flush()

    logger.info(f"Added user {user_id} to workspace {workspace_id} as {member.role.value}")
    return member


def remove_member(db: Session, user_id: int, workspace_id: int) -> None:
    """
    Remove a membership row.

    The owner can never be removed, whatever role their row carries.

    Raises:
        NotFound: if there is no membership row for the pair
        CannotRemoveOwner: if ``user_id`` owns the workspace
    """
    member = get_member(db, user_id, workspace_id)
    if member is None:
        raise NotFound(f"Member not found with userId: {user_id} and workspaceId: {workspace_id}")

    if member.workspace.owner_id == user_id:
        logger.warning(f"Refused to remove owner {user_id} from workspace {workspace_id}")
        raise CannotRemoveOwner("Cannot remove workspace owner")

    db.delete(member)
    db.commit()
    logger.info(f"Removed user {user_id} from workspace {workspace_id}")


def update_member_role(db: Session, user_id: int, workspace_id: int, role: MemberRole) -> models.WorkspaceMember:
    member = get_member(db, user_id, workspace_id)
    if member is None:
        raise NotFound(f"Member not found with userId: {user_id} and workspaceId: {workspace_id}")

    member.role = role
    db.commit()
    db.refresh(member)
    logger.info(f"Updated user {user_id} role in workspace {workspace_id} to {role.value}")
    return member


def list_members(db: Session, workspace_id: int) -> list[models.WorkspaceMember]:
    _require_workspace(db, workspace_id)
    return (
        db.query(models.WorkspaceMember)
        .filter(models.WorkspaceMember.workspace_id == workspace_id)
        .order_by(models.WorkspaceMember.id.asc())
        .all()
    )


def list_user_memberships(db: Session, user_id: int) -> list[models.WorkspaceMember]:
    users.get_user(db, user_id)
    return (
        db.query(models.WorkspaceMember)
        .filter(models.WorkspaceMember.user_id == user_id)
        .order_by(models.WorkspaceMember.id.asc())
        .all()
    )


def is_authorized(db: Session, user: models.User, workspace: models.Workspace) -> bool:
    """True when ``user`` owns ``workspace`` or holds a membership row in it."""
    if workspace.owner_id == user.id:
        return True
    return get_member(db, user.id, workspace.id) is not None


def ensure_workspace_access(db: Session, user: models.User, workspace: models.Workspace) -> None:
    if not is_authorized(db, user, workspace):
        logger.warning(f"User {user.id} denied access to workspace {workspace.id}")
        raise Forbidden("You are not a member of this workspace")
