"""Request-scoped FastAPI dependencies."""
from typing import Optional

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from teamboard import models
from teamboard.database import get_db
from teamboard.services import auth


def get_current_user(
    authorization: Optional[str] = Header(default=None),
    db: Session = Depends(get_db),
) -> models.User:
    """Resolve the caller from the ``Authorization: Bearer <JWT>`` header."""
    return auth.resolve_caller_from_bearer_token(db, authorization)


def get_bearer_token(authorization: Optional[str] = Header(default=None)) -> str:
    return auth.extract_bearer_token(authorization)
