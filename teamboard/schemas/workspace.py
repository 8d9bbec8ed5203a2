"""Schemas for workspaces"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class WorkspaceCreate(BaseModel):
    name: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None


class WorkspaceUpdate(WorkspaceCreate):
    pass


class WorkspaceResponse(BaseModel):
    id: int
    name: str
    description: Optional[str]
    owner_id: int
    owner_name: Optional[str]
    owner_email: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
