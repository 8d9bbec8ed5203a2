"""User records: registration, profile updates and password changes."""
import logging
from typing import Optional

from email_validator import EmailNotValidError, validate_email
from sqlalchemy.orm import Session

from teamboard import models
from teamboard.exceptions import Conflict, NotFound, ValidationError
from teamboard.security import hash_password

logger = logging.getLogger("teamboard.users")


def _initials_from_name(name: Optional[str]) -> Optional[str]:
    if not name or not name.strip():
        return None
    return "".join(part[0] for part in name.split())[:3].upper()


def normalize_email(email: Optional[str]) -> str:
    if email is None or not email.strip():
        raise ValidationError("Email is required")
    try:
        return validate_email(email.strip(), check_deliverability=False).normalized
    except EmailNotValidError as e:
        raise ValidationError(f"Invalid email address: {e}") from e


def create_user(
    db: Session,
    email: Optional[str],
    password: Optional[str],
    name: Optional[str] = None,
    avatar_initials: Optional[str] = None,
) -> models.User:
    """
    Register a new user.

    Only the bcrypt hash of ``password`` is stored.

    Raises:
        ValidationError: if the password or email is missing or malformed
        Conflict: if the email is already registered
    """
    if password is None or not password.strip():
        raise ValidationError("Password is required")
    email = normalize_email(email)

    if find_by_email(db, email) is not None:
        raise Conflict("Email already registered")

    user = models.User(
        email=email,
        name=name,
        avatar_initials=avatar_initials or _initials_from_name(name),
        password_hash=hash_password(password),
    )
    db.add(user)
    db.commit()
    db.refresh(user)

    logger.info(f"Registered user {user.id}")
    return user


def find_user(db: Session, user_id: int) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.id == user_id).first()


def get_user(db: Session, user_id: int) -> models.User:
    user = find_user(db, user_id)
    if user is None:
        raise NotFound(f"User not found with id: {user_id}")
    return user


def find_by_email(db: Session, email: str) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.email == email).first()


def list_users(db: Session) -> list[models.User]:
    return db.query(models.User).order_by(models.User.id.asc()).all()


def update_user(
    db: Session,
    user_id: int,
    name: Optional[str] = None,
    email: Optional[str] = None,
    avatar_initials: Optional[str] = None,
) -> models.User:
    """Update profile fields. The password is never changed here."""
    user = get_user(db, user_id)

    if email is not None:
        email = normalize_email(email)
        other = find_by_email(db, email)
        if other is not None and other.id != user.id:
            raise Conflict("Email already registered")
        user.email = email
    if name is not None:
        user.name = name
    if avatar_initials is not None:
        user.avatar_initials = avatar_initials

    db.commit()
    db.refresh(user)
    logger.debug(f"Updated user {user_id}")
    return user


def change_password(db: Session, user_id: int, raw_password: Optional[str]) -> models.User:
    if raw_password is None or not raw_password.strip():
        raise ValidationError("Password is required")

    user = get_user(db, user_id)
    user.password_hash = hash_password(raw_password)
    db.commit()
    db.refresh(user)
    logger.info(f"Changed password for user {user_id}")
    return user


def delete_user(db: Session, user_id: int) -> None:
    """
    Delete a user account.

    A user still referenced as a workspace owner or as the creator of a
    project or task cannot be deleted. Tasks assigned to the user are
    unassigned.
    """
    user = get_user(db, user_id)

    if user.owned_workspaces:
        raise Conflict("User still owns workspaces")
    created_projects = db.query(models.Project).filter(models.Project.created_by_id == user_id).count()
    created_tasks = db.query(models.Task).filter(models.Task.created_by_id == user_id).count()
    if created_projects or created_tasks:
        raise Conflict("User is still the creator of projects or tasks")

    db.query(models.Task).filter(models.Task.assigned_to_id == user_id).update(
        {models.Task.assigned_to_id: None}, synchronize_session=False
    )
    db.delete(user)
    db.commit()
    logger.info(f"Deleted user {user_id}")
