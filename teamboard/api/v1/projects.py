"""Project endpoints, nested under a workspace"""
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from teamboard import models, schemas
from teamboard.database import get_db
from teamboard.dependencies import get_current_user
from teamboard.services import projects
from teamboard.api.v1.access import scoped_project_for_user, workspace_for_user
from teamboard.api.v1.serializers import serialize_project

router = APIRouter(tags=["projects"])


@router.post(
    "/{workspace_id}/projects",
    response_model=schemas.ProjectResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_project(
    workspace_id: int,
    project_in: schemas.ProjectCreate,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Create a project with its BACKLOG / TO_DO / IN_PROGRESS / DONE board."""
    workspace = workspace_for_user(db, workspace_id, current_user)
    project = projects.create_project(db, project_in.name, project_in.description, workspace.id, current_user)
    return serialize_project(project)


@router.get("/{workspace_id}/projects", response_model=List[schemas.ProjectResponse])
def list_projects(
    workspace_id: int,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    workspace = workspace_for_user(db, workspace_id, current_user)
    return [serialize_project(p) for p in projects.list_by_workspace(db, workspace.id)]


@router.get("/{workspace_id}/projects/{project_id}", response_model=schemas.ProjectResponse)
def get_project(
    workspace_id: int,
    project_id: int,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    project = scoped_project_for_user(db, workspace_id, project_id, current_user)
    return serialize_project(project)


@router.put("/{workspace_id}/projects/{project_id}", response_model=schemas.ProjectResponse)
def update_project(
    workspace_id: int,
    project_id: int,
    project_in: schemas.ProjectUpdate,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Rename or re-describe a project. Only its creator may do this."""
    project = scoped_project_for_user(db, workspace_id, project_id, current_user)
    projects.ensure_project_creator(project, current_user)
    project = projects.update_project(db, project.id, project_in.name, project_in.description)
    return serialize_project(project)


@router.delete("/{workspace_id}/projects/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_project(
    workspace_id: int,
    project_id: int,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Delete a project with its columns and tasks. Only its creator may do this."""
    project = scoped_project_for_user(db, workspace_id, project_id, current_user)
    projects.ensure_project_creator(project, current_user)
    projects.delete_project(db, project.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
