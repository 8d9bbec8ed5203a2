"""Board column endpoints"""
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from teamboard import models, schemas
from teamboard.database import get_db
from teamboard.dependencies import get_current_user
from teamboard.services import board_columns
from teamboard.api.v1.access import project_for_user, scoped_project_for_user
from teamboard.api.v1.serializers import serialize_column

router = APIRouter(tags=["columns"])


@router.get("/projects/{project_id}/columns", response_model=List[schemas.BoardColumnResponse])
def list_project_columns(
    project_id: int,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """The project's four columns ordered by position."""
    project = project_for_user(db, project_id, current_user)
    return [serialize_column(c) for c in board_columns.get_columns_by_project_id(db, project.id)]


@router.get(
    "/workspaces/{workspace_id}/projects/{project_id}/columns",
    response_model=List[schemas.BoardColumnResponse],
)
def list_workspace_project_columns(
    workspace_id: int,
    project_id: int,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    project = scoped_project_for_user(db, workspace_id, project_id, current_user)
    return [serialize_column(c) for c in board_columns.get_columns_by_project_id(db, project.id)]
