"""Registration, login, token refresh and the caller's profile."""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from teamboard import models, schemas
from teamboard.database import get_db
from teamboard.dependencies import get_bearer_token, get_current_user
from teamboard.services import auth, users
from teamboard.api.v1.serializers import serialize_user

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=schemas.MessageResponse)
def register(user_in: schemas.UserCreate, db: Session = Depends(get_db)):
    """Create an account. Responds 400 when the email is taken or a field is missing."""
    users.create_user(
        db,
        email=user_in.email,
        password=user_in.password,
        name=user_in.name,
        avatar_initials=user_in.avatar_initials,
    )
    return schemas.MessageResponse(message="User created successfully")


@router.post("/login", response_model=schemas.Token)
def login(credentials: schemas.UserLogin, db: Session = Depends(get_db)):
    return auth.authenticate(db, credentials.email, credentials.password)


@router.post("/refresh", response_model=schemas.Token)
def refresh(refresh_token: str = Depends(get_bearer_token)):
    """Exchange the refresh token sent as ``Authorization: Bearer <refresh>`` for a new access token."""
    return auth.issue_access_token_from_refresh(refresh_token)


@router.get("/me", response_model=schemas.UserResponse)
def read_current_user(current_user: models.User = Depends(get_current_user)):
    return serialize_user(current_user)


@router.put("/me", response_model=schemas.UserResponse)
def update_current_user(
    user_update: schemas.UserUpdate,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    user = users.update_user(
        db,
        current_user.id,
        name=user_update.name,
        email=user_update.email,
        avatar_initials=user_update.avatar_initials,
    )
    return serialize_user(user)


@router.put("/me/password", response_model=schemas.MessageResponse)
def change_password(
    password_in: schemas.PasswordChange,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    users.change_password(db, current_user.id, password_in.password)
    return schemas.MessageResponse(message="Password changed successfully")
