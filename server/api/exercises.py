# server/api/exercises.py

import logging
from pydantic import BaseModel, Field, ValidationError
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from api.users import read_payload, error_response
from core import store
from core.errors import StoreError
from core.utils import as_number, parse_limit, to_date_string
from database import get_db


router = APIRouter(prefix="/api/users")

log = logging.getLogger("exercise_tracker.api")


class NewExercise(BaseModel):
    description: str | None = None
    duration: float | None = Field(None, allow_inf_nan=False)
    date: str | None = None


@router.post("/{user_id}/exercises")
def add_exercise(user_id: str, payload: dict = Depends(read_payload), db: Session = Depends(get_db)):
    """
    Logs an exercise and echoes it together with the owning user.
    The exercise is only committed when the user exists.
    """
    try:
        req = NewExercise(**payload)
        exercise = store.create_exercise(db, user_id, req.description, req.duration, req.date)
        user = store.get_user_by_id(db, user_id)
        if user is None:
            db.rollback()
            log.warning("Error adding exercise: no user %s", user_id)
            return error_response("Error adding exercise")
        store.commit(db)
    except (StoreError, ValidationError) as e:
        db.rollback()
        log.warning("Error adding exercise: %s", e)
        return error_response("Error adding exercise")

    return {
        "username": user.username,
        "id": user.id,
        "description": exercise.description,
        "duration": as_number(exercise.duration),
        "date": exercise.date,
    }


@router.get("/{user_id}/logs")
def get_logs(
    user_id: str,
    date_from: str | None = Query(None, alias="from"),
    date_to: str | None = Query(None, alias="to"),
    limit: str | None = None,
    db: Session = Depends(get_db),
):
    try:
        lower = to_date_string(date_from) if date_from else None
        upper = to_date_string(date_to) if date_to else None
        user = store.get_user_by_id(db, user_id)
        exercises = store.list_exercises(db, user_id, lower, upper, parse_limit(limit))
    except (StoreError, ValueError) as e:
        log.warning("Error fetching logs: %s", e)
        return error_response("Error fetching logs")

    if user is None:
        log.warning("Error fetching logs: no user %s", user_id)
        return error_response("Error fetching logs")

    return {
        "username": user.username,
        "count": len(exercises),
        "id": user.id,
        "log": [exercise.to_log_entry() for exercise in exercises],
    }
