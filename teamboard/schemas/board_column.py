"""Schemas for board columns"""
from datetime import datetime

from pydantic import BaseModel

from teamboard.models import ColumnName


class BoardColumnResponse(BaseModel):
    id: int
    name: ColumnName
    position: int
    project_id: int
    created_at: datetime

    class Config:
        from_attributes = True
