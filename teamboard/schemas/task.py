"""Schemas for tasks"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from teamboard.models import ColumnName, Priority


class TaskCreate(BaseModel):
    title: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    assigned_to_id: Optional[int] = None
    priority: Optional[Priority] = None
    due_date: Optional[datetime] = None


class TaskUpdate(TaskCreate):
    pass


class TaskAssign(BaseModel):
    user_id: Optional[int] = None


class TaskResponse(BaseModel):
    id: int
    title: str
    description: Optional[str]
    project_id: int
    column_id: int
    column_name: ColumnName
    assigned_to_id: Optional[int]
    assigned_to_name: Optional[str]
    assigned_to_initials: Optional[str]
    priority: Priority
    due_date: Optional[datetime]
    created_by_id: int
    created_by_name: Optional[str]
    created_at: datetime
    updated_at: datetime
    completed_at: Optional[datetime]

    class Config:
        from_attributes = True
