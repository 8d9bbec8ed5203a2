"""Schemas for users and authentication"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field


class UserCreate(BaseModel):
    name: Optional[str] = Field(None, max_length=255)
    email: Optional[str] = None
    password: Optional[str] = None
    avatar_initials: Optional[str] = Field(None, max_length=10)


class UserLogin(BaseModel):
    email: str
    password: str


class UserUpdate(BaseModel):
    name: Optional[str] = Field(None, max_length=255)
    email: Optional[EmailStr] = None
    avatar_initials: Optional[str] = Field(None, max_length=10)


class PasswordChange(BaseModel):
    password: str = Field(..., min_length=1)


class UserSummary(BaseModel):
    id: int
    name: Optional[str]
    email: str
    avatar_initials: Optional[str]

    class Config:
        from_attributes = True


class UserResponse(UserSummary):
    created_at: datetime
    updated_at: datetime


class Token(BaseModel):
    access_token: str
    refresh_token: str
    username: str
    expires_in: int
    token_type: str = "bearer"


class MessageResponse(BaseModel):
    message: str
