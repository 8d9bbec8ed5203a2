"""ORM -> response projections. Password hashes never leave this layer."""
from teamboard import models, schemas


def serialize_user(user: models.User) -> schemas.UserResponse:
    return schemas.UserResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        avatar_initials=user.avatar_initials,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


def serialize_workspace(workspace: models.Workspace) -> schemas.WorkspaceResponse:
    return schemas.WorkspaceResponse(
        id=workspace.id,
        name=workspace.name,
        description=workspace.description,
        owner_id=workspace.owner.id,
        owner_name=workspace.owner.name,
        owner_email=workspace.owner.email,
        created_at=workspace.created_at,
        updated_at=workspace.updated_at,
    )


def serialize_member(member: models.WorkspaceMember) -> schemas.WorkspaceMemberResponse:
    return schemas.WorkspaceMemberResponse(
        id=member.id,
        workspace_id=member.workspace_id,
        user_id=member.user.id,
        user_email=member.user.email,
        user_name=member.user.name,
        role=member.role,
        joined_at=member.joined_at,
        updated_at=member.updated_at,
    )


def serialize_project(project: models.Project) -> schemas.ProjectResponse:
    return schemas.ProjectResponse(
        id=project.id,
        name=project.name,
        description=project.description,
        workspace_id=project.workspace_id,
        created_by_id=project.created_by.id,
        created_by_name=project.created_by.name,
        created_at=project.created_at,
        updated_at=project.updated_at,
    )


def serialize_column(column: models.BoardColumn) -> schemas.BoardColumnResponse:
    return schemas.BoardColumnResponse.model_validate(column)


def serialize_task(task: models.Task) -> schemas.TaskResponse:
    assignee = task.assigned_to
    return schemas.TaskResponse(
        id=task.id,
        title=task.title,
        description=task.description,
        project_id=task.project_id,
        column_id=task.column.id,
        column_name=task.column.name,
        assigned_to_id=assignee.id if assignee else None,
        assigned_to_name=assignee.name if assignee else None,
        assigned_to_initials=assignee.avatar_initials if assignee else None,
        priority=task.priority,
        due_date=task.due_date,
        created_by_id=task.created_by.id,
        created_by_name=task.created_by.name,
        created_at=task.created_at,
        updated_at=task.updated_at,
        completed_at=task.completed_at,
    )
