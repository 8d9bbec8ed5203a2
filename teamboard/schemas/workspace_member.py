"""Schemas for workspace members"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from teamboard.models import MemberRole


class WorkspaceMemberCreate(BaseModel):
    user_id: int
    role: Optional[MemberRole] = None


class WorkspaceMemberUpdate(BaseModel):
    role: MemberRole


class WorkspaceMemberResponse(BaseModel):
    id: int
    workspace_id: int
    user_id: int
    user_email: str
    user_name: Optional[str]
    role: MemberRole
    joined_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
