# server/core/store.py

"""
Data access layer for users and exercises.

Every function takes the request's SQLAlchemy session; writes are flushed but
not committed, so a handler can make several calls inside one transaction and
finish with commit().
"""

import math
from typing import Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.errors import StoreReadError, StoreWriteError
from core.utils import is_object_id, to_date_string, today_string
from models import Exercise, User


# -------------------------------
# Users
# -------------------------------

def create_user(db: Session, username: Optional[str]) -> User:
    if not username:
        raise StoreWriteError("username is required")

    user = User(username=username)
    try:
        db.add(user)
        db.flush()
    except SQLAlchemyError as e:
        db.rollback()
        raise StoreWriteError("could not create user") from e
    return user


def list_users(db: Session) -> list[User]:
    try:
        return db.query(User).all()
    except SQLAlchemyError as e:
        raise StoreReadError("could not list users") from e


def get_user_by_id(db: Session, user_id: str) -> Optional[User]:
    """
    Returns the user, or None when no user has this id.
    A malformed id is a read error, not a miss.
    """
    if not is_object_id(user_id):
        raise StoreReadError(f"malformed user id: {user_id!r}")
    try:
        return db.get(User, user_id)
    except SQLAlchemyError as e:
        raise StoreReadError(f"could not fetch user {user_id}") from e


# -------------------------------
# Exercises
# -------------------------------

def create_exercise(
    db: Session,
    user_id: str,
    description: Optional[str],
    duration: Optional[float],
    date: Optional[str] = None,
) -> Exercise:
    if not is_object_id(user_id):
        raise StoreWriteError(f"malformed user id: {user_id!r}")

    try:
        exercise_date = to_date_string(date) if date else today_string()
        exercise_duration = float(duration) if duration is not None else None
        if exercise_duration is not None and not math.isfinite(exercise_duration):
            raise ValueError(f"duration must be finite: {duration!r}")
    except (TypeError, ValueError) as e:
        raise StoreWriteError("invalid exercise fields") from e

    exercise = Exercise(
        description=description,
        duration=exercise_duration,
        date=exercise_date,
        user_id=user_id,
    )
    try:
        db.add(exercise)
        db.flush()
    except SQLAlchemyError as e:
        db.rollback()
        raise StoreWriteError("could not create exercise") from e
    return exercise


def list_exercises(
    db: Session,
    user_id: str,
    date_from: Optional[str] = None,
    date_to: Optional[str] = None,
    limit: int = 0,
) -> list[Exercise]:
    """
    Lists a user's exercises in store order.
    Date bounds are canonical date text and are compared as text, not as
    calendar dates. A limit of 0 means no limit.
    """
    if not is_object_id(user_id):
        raise StoreReadError(f"malformed user id: {user_id!r}")

    query = db.query(Exercise).filter(Exercise.user_id == user_id)
    if date_from:
        query = query.filter(Exercise.date >= date_from)
    if date_to:
        query = query.filter(Exercise.date <= date_to)
    if limit:
        query = query.limit(limit)

    try:
        return query.all()
    except SQLAlchemyError as e:
        raise StoreReadError(f"could not list exercises for {user_id}") from e


def commit(db: Session):
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise StoreWriteError("commit failed") from e
