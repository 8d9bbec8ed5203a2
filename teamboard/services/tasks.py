"""Task lifecycle and column movement."""
import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.orm import Session

from teamboard import models
from teamboard.exceptions import NotFound, ValidationError
from teamboard.models import ColumnName, Priority
from teamboard.services import board_columns, projects, users

logger = logging.getLogger("teamboard.tasks")


def _require_title(title: Optional[str]) -> str:
    if title is None or not title.strip():
        raise ValidationError("Task title is required")
    return title


def create_task(
    db: Session,
    title: Optional[str],
    description: Optional[str],
    project_id: int,
    creator: models.User,
    priority: Optional[Priority] = None,
    due_date: Optional[datetime] = None,
    assignee_id: Optional[int] = None,
) -> models.Task:
    """
    Create a task in the project's BACKLOG column.

    Callers cannot choose the initial column. An ``assignee_id`` that does
    not resolve to a user leaves the task unassigned instead of failing.

    Raises:
        NotFound: project absent, or the project has no BACKLOG column
        ValidationError: blank title
    """
    project = projects.get_project(db, project_id)
    backlog = board_columns.get_column_by_name(db, project.id, ColumnName.BACKLOG)
    title = _require_title(title)

    assignee = users.find_user(db, assignee_id) if assignee_id is not None else None
    if assignee_id is not None and assignee is None:
        logger.debug(f"Ignoring unknown assignee {assignee_id} for new task in project {project_id}")

    task = models.Task(
        title=title,
        description=description,
        project=project,
        column=backlog,
        priority=priority or Priority.MEDIUM,
        due_date=due_date,
        assigned_to=assignee,
        created_by=creator,
    )
    db.add(task)
    db.commit()
    db.refresh(task)

    logger.info(f"Created task {task.id} in project {project_id}")
    return task


def get_task(db: Session, task_id: int) -> models.Task:
    task = db.query(models.Task).filter(models.Task.id == task_id).first()
    if task is None:
        raise NotFound(f"Task not found with id: {task_id}")
    return task


def list_by_project(db: Session, project_id: int) -> list[models.Task]:
    """Tasks of a project, newest first."""
    projects.get_project(db, project_id)
    return (
        db.query(models.Task)
        .filter(models.Task.project_id == project_id)
        .order_by(models.Task.created_at.desc(), models.Task.id.desc())
        .all()
    )


def list_by_column(db: Session, column_id: int) -> list[models.Task]:
    """Tasks in a column, newest first."""
    board_columns.get_column_by_id(db, column_id)
    return (
        db.query(models.Task)
        .filter(models.Task.column_id == column_id)
        .order_by(models.Task.created_at.desc(), models.Task.id.desc())
        .all()
    )


def update_task(
    db: Session,
    task_id: int,
    title: Optional[str],
    description: Optional[str],
    priority: Optional[Priority] = None,
    due_date: Optional[datetime] = None,
    assignee_id: Optional[int] = None,
) -> models.Task:
    """
    Replace the editable fields of a task.

    Project and column are never changed here; use ``move_to_column``.
    A ``None`` priority resets to MEDIUM and a ``None`` assignee unassigns.

    Raises:
        NotFound: task absent, or ``assignee_id`` does not resolve to a user
        ValidationError: blank title
    """
    task = get_task(db, task_id)
    title = _require_title(title)
    assignee = users.get_user(db, assignee_id) if assignee_id is not None else None

    task.title = title
    task.description = description
    task.priority = priority or Priority.MEDIUM
    task.due_date = due_date
    task.assigned_to = assignee

    db.commit()
    db.refresh(task)
    logger.debug(f"Updated task {task_id}")
    return task


def move_to_column(db: Session, task_id: int, column_id: int) -> models.Task:
    """
    Move a task to another column of the same project.

    Moving to the column the task is already in returns the task untouched
    and performs no write. Entering DONE stamps ``completed_at``; leaving
    DONE clears it.

    Raises:
        NotFound: task or column absent
        ValidationError: the column belongs to another project
    """
    task = get_task(db, task_id)
    column = board_columns.get_column_by_id(db, column_id)

    if column.project_id != task.project_id:
        raise ValidationError("Column does not belong to task's project")

    if task.column_id == column.id:
        return task

    previous = task.column.name
    task.column = column
    if column.name == ColumnName.DONE:
        task.completed_at = datetime.now(timezone.utc)
    elif previous == ColumnName.DONE:
        task.completed_at = None

    db.commit()
    db.refresh(task)
    logger.info(f"Moved task {task_id} from {previous.value} to {column.name.value}")
    return task


def assign_task(db: Session, task_id: int, user_id: Optional[int]) -> models.Task:
    """Assign the task to ``user_id``, or unassign it when ``user_id`` is None."""
    task = get_task(db, task_id)
    task.assigned_to = users.get_user(db, user_id) if user_id is not None else None

    db.commit()
    db.refresh(task)
    logger.info(f"Assigned task {task_id} to {user_id if user_id is not None else 'nobody'}")
    return task


def delete_task(db: Session, task_id: int) -> None:
    task = get_task(db, task_id)
    db.delete(task)
    db.commit()
    logger.info(f"Deleted task {task_id}")
