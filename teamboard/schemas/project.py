"""Schemas for projects"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ProjectCreate(BaseModel):
    name: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None


class ProjectUpdate(ProjectCreate):
    pass


class ProjectResponse(BaseModel):
    id: int
    name: str
    description: Optional[str]
    workspace_id: int
    created_by_id: int
    created_by_name: Optional[str]
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
