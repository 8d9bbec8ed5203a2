"""Project lifecycle inside a workspace."""
import logging
from typing import Optional

from sqlalchemy.orm import Session

from teamboard import models
from teamboard.exceptions import Forbidden, NotFound, ValidationError
from teamboard.services import board_columns, workspaces

logger = logging.getLogger("teamboard.projects")


def _require_name(name: Optional[str]) -> str:
    if name is None or not name.strip():
        raise ValidationError("Project name is required")
    return name


def create_project(
    db: Session,
    name: Optional[str],
    description: Optional[str],
    workspace_id: int,
    creator: models.User,
) -> models.Project:
    """
    Create a project and its default board in one transaction.

    Callers are expected to have checked workspace access already.

    Raises:
        NotFound: if the workspace does not exist
        ValidationError: blank name
    """
    workspace = workspaces.get_workspace(db, workspace_id)
    name = _require_name(name)

    project = models.Project(
        name=name,
        description=description,
        workspace=workspace,
        created_by=creator,
    )
    try:
        db.add(project)
        db.flush()
        board_columns.create_default_columns(db, project.id)
        db.commit()
    except Exception:
        db.rollback()
        logger.error(f"Error creating project in workspace {workspace_id}", exc_info=True)
        raise

    db.refresh(project)
    logger.info(f"Created project '{project.name}' (ID: {project.id}) in workspace {workspace_id}")
    return project


def get_project(db: Session, project_id: int) -> models.Project:
    project = db.query(models.Project).filter(models.Project.id == project_id).first()
    if project is None:
        raise NotFound("Project not found")
    return project


def get_project_in_workspace(db: Session, workspace_id: int, project_id: int) -> models.Project:
    project = get_project(db, project_id)
    if project.workspace_id != workspace_id:
        raise NotFound("Project not found in workspace")
    return project


def list_by_workspace(db: Session, workspace_id: int) -> list[models.Project]:
    workspaces.get_workspace(db, workspace_id)
    return (
        db.query(models.Project)
        .filter(models.Project.workspace_id == workspace_id)
        .order_by(models.Project.id.asc())
        .all()
    )


def update_project(
    db: Session,
    project_id: int,
    name: Optional[str],
    description: Optional[str],
) -> models.Project:
    """Rename or re-describe a project. Workspace and creator never change."""
    project = get_project(db, project_id)
    project.name = _require_name(name)
    project.description = description

    db.commit()
    db.refresh(project)
    logger.debug(f"Updated project {project_id}")
    return project


def delete_project(db: Session, project_id: int) -> None:
    project = get_project(db, project_id)
    db.delete(project)
    db.commit()
    logger.info(f"Deleted project {project_id}")


def ensure_project_creator(project: models.Project, user: models.User) -> None:
    if project.created_by_id != user.id:
        logger.warning(f"User {user.id} is not the creator of project {project.id}")
        raise Forbidden("Only the project creator can perform this action")
