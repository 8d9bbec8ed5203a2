"""Task endpoints"""
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from teamboard import models, schemas
from teamboard.database import get_db
from teamboard.dependencies import get_current_user
from teamboard.services import board_columns, members, tasks
from teamboard.api.v1.access import project_for_user, scoped_project_for_user, task_for_user
from teamboard.api.v1.serializers import serialize_task

router = APIRouter(tags=["tasks"])


def _create_task(db: Session, project: models.Project, task_in: schemas.TaskCreate, creator: models.User):
    task = tasks.create_task(
        db,
        title=task_in.title,
        description=task_in.description,
        project_id=project.id,
        creator=creator,
        priority=task_in.priority,
        due_date=task_in.due_date,
        assignee_id=task_in.assigned_to_id,
    )
    return serialize_task(task)


@router.post(
    "/projects/{project_id}/tasks",
    response_model=schemas.TaskResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_task(
    project_id: int,
    task_in: schemas.TaskCreate,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Create a task. It always starts in the BACKLOG column."""
    project = project_for_user(db, project_id, current_user)
    return _create_task(db, project, task_in, current_user)


@router.get("/projects/{project_id}/tasks", response_model=List[schemas.TaskResponse])
def list_project_tasks(
    project_id: int,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    project = project_for_user(db, project_id, current_user)
    return [serialize_task(t) for t in tasks.list_by_project(db, project.id)]


@router.post(
    "/workspaces/{workspace_id}/projects/{project_id}/tasks",
    response_model=schemas.TaskResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_workspace_project_task(
    workspace_id: int,
    project_id: int,
    task_in: schemas.TaskCreate,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    project = scoped_project_for_user(db, workspace_id, project_id, current_user)
    return _create_task(db, project, task_in, current_user)


@router.get(
    "/workspaces/{workspace_id}/projects/{project_id}/tasks",
    response_model=List[schemas.TaskResponse],
)
def list_workspace_project_tasks(
    workspace_id: int,
    project_id: int,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    project = scoped_project_for_user(db, workspace_id, project_id, current_user)
    return [serialize_task(t) for t in tasks.list_by_project(db, project.id)]


@router.get("/columns/{column_id}/tasks", response_model=List[schemas.TaskResponse])
def list_column_tasks(
    column_id: int,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    column = board_columns.get_column_by_id(db, column_id)
    members.ensure_workspace_access(db, current_user, column.project.workspace)
    return [serialize_task(t) for t in tasks.list_by_column(db, column.id)]


@router.get("/tasks/{task_id}", response_model=schemas.TaskResponse)
def get_task(
    task_id: int,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return serialize_task(task_for_user(db, task_id, current_user))


@router.put("/tasks/{task_id}", response_model=schemas.TaskResponse)
def update_task(
    task_id: int,
    task_in: schemas.TaskUpdate,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Replace title, description, priority, due date and assignee.

    The column is not editable here; use the move endpoint.
    """
    task = task_for_user(db, task_id, current_user)
    task = tasks.update_task(
        db,
        task.id,
        title=task_in.title,
        description=task_in.description,
        priority=task_in.priority,
        due_date=task_in.due_date,
        assignee_id=task_in.assigned_to_id,
    )
    return serialize_task(task)


@router.delete("/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(
    task_id: int,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    task = task_for_user(db, task_id, current_user)
    tasks.delete_task(db, task.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/tasks/{task_id}/column/{column_id}", response_model=schemas.TaskResponse)
def move_task(
    task_id: int,
    column_id: int,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    task = task_for_user(db, task_id, current_user)
    return serialize_task(tasks.move_to_column(db, task.id, column_id))


@router.patch("/tasks/{task_id}/assignee", response_model=schemas.TaskResponse)
def assign_task(
    task_id: int,
    assign_in: schemas.TaskAssign,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Assign the task to ``user_id``, or unassign it with ``null``."""
    task = task_for_user(db, task_id, current_user)
    return serialize_task(tasks.assign_task(db, task.id, assign_in.user_id))
