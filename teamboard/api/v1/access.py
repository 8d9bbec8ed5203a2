"""Workspace -> Project -> Task authorization walk shared by the routers."""
from sqlalchemy.orm import Session

from teamboard import models
from teamboard.services import members, projects, tasks, workspaces


def workspace_for_user(db: Session, workspace_id: int, user: models.User) -> models.Workspace:
    workspace = workspaces.get_workspace(db, workspace_id)
    members.ensure_workspace_access(db, user, workspace)
    return workspace


def project_for_user(db: Session, project_id: int, user: models.User) -> models.Project:
    project = projects.get_project(db, project_id)
    members.ensure_workspace_access(db, user, project.workspace)
    return project


def scoped_project_for_user(
    db: Session, workspace_id: int, project_id: int, user: models.User
) -> models.Project:
    """Like ``project_for_user`` but 404s when the project lives in another workspace."""
    workspace = workspaces.get_workspace(db, workspace_id)
    project = projects.get_project_in_workspace(db, workspace.id, project_id)
    members.ensure_workspace_access(db, user, workspace)
    return project


def task_for_user(db: Session, task_id: int, user: models.User) -> models.Task:
    task = tasks.get_task(db, task_id)
    members.ensure_workspace_access(db, user, task.project.workspace)
    return task
