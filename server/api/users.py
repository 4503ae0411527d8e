# server/api/users.py

import logging
from pydantic import BaseModel, ConfigDict, ValidationError
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from core import store
from core.errors import StoreError
from database import get_db


router = APIRouter(prefix="/api/users")

log = logging.getLogger("exercise_tracker.api")


class NewUser(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    username: str | None = None


async def read_payload(request: Request) -> dict:
    """
    Reads a request body sent as JSON or as a form.
    Anything unreadable is treated as an empty body.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            data = await request.json()
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}
    if content_type.startswith(("application/x-www-form-urlencoded", "multipart/form-data")):
        form = await request.form()
        return dict(form)
    return {}


def error_response(message: str) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": message})


@router.post("")
def create_user(payload: dict = Depends(read_payload), db: Session = Depends(get_db)):
    try:
        req = NewUser(**payload)
        user = store.create_user(db, req.username)
        store.commit(db)
    except (StoreError, ValidationError) as e:
        db.rollback()
        log.warning("Error creating user: %s", e)
        return error_response("Error creating user")

    log.info("Created user %s (%s)", user.id, user.username)
    return {"username": user.username, "id": user.id}


@router.get("")
def list_users(db: Session = Depends(get_db)):
    try:
        users = store.list_users(db)
    except StoreError as e:
        log.warning("Error fetching users: %s", e)
        return error_response("Error fetching users")
    return [user.to_dict() for user in users]
