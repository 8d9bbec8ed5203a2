"""Fixed four-column board created with every project."""
import logging

from sqlalchemy.orm import Session

from teamboard import models
from teamboard.exceptions import Conflict, NotFound
from teamboard.models import ColumnName

logger = logging.getLogger("teamboard.board_columns")

# Display order of the board; position is the 1-based index in this tuple.
DEFAULT_COLUMNS = (
    ColumnName.BACKLOG,
    ColumnName.TO_DO,
    ColumnName.IN_PROGRESS,
    ColumnName.DONE,
)


def _require_project(db: Session, project_id: int) -> models.Project:
    project = db.query(models.Project).filter(models.Project.id == project_id).first()
    if project is None:
        raise NotFound(f"Project not found with id: {project_id}")
    return project


def create_default_columns(db: Session, project_id: int) -> list[models.BoardColumn]:
    """
    Create BACKLOG, TO_DO, IN_PROGRESS and DONE at positions 1-4.

    The new rows are flushed, not committed: the caller owns the
    transaction so the project and its board are persisted together.

    Raises:
        NotFound: if the project does not exist
        Conflict: if the project already has columns
    """
    project = _require_project(db, project_id)

    existing = db.query(models.BoardColumn).filter(models.BoardColumn.project_id == project_id).count()
    if existing:
        raise Conflict(f"Project {project_id} already has board columns")

    columns = [
        models.BoardColumn(name=name, position=position, project=project)
        for position, name in enumerate(DEFAULT_COLUMNS, start=1)
    ]
    db.add_all(columns)
    db.flush()

    logger.debug(f"Created default columns for project {project_id}")
    return columns


def get_columns_by_project_id(db: Session, project_id: int) -> list[models.BoardColumn]:
    _require_project(db, project_id)
    return (
        db.query(models.BoardColumn)
        .filter(models.BoardColumn.project_id == project_id)
        .order_by(models.BoardColumn.position.asc())
        .all()
    )


def get_column_by_id(db: Session, column_id: int) -> models.BoardColumn:
    column = db.query(models.BoardColumn).filter(models.BoardColumn.id == column_id).first()
    if column is None:
        raise NotFound(f"Board column not found with id: {column_id}")
    return column


def get_column_by_name(db: Session, project_id: int, name: ColumnName) -> models.BoardColumn:
    column = (
        db.query(models.BoardColumn)
        .filter(models.BoardColumn.project_id == project_id, models.BoardColumn.name == name)
        .order_by(models.BoardColumn.position.asc())
        .first()
    )
    if column is None:
        raise NotFound(f"{name.value.replace('_', ' ').title()} column not found for project: {project_id}")
    return column
