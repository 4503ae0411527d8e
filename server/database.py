# server/database.py

import logging
import os
import sys
from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from models import Base


load_dotenv()

log = logging.getLogger("exercise_tracker.database")

DB_URL = os.getenv("DB_URL", "sqlite:///./exercise_tracker.db")


def make_engine(url: str, **kwargs):
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    return create_engine(url, **kwargs)


engine = make_engine(DB_URL)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)


def init_db(bind=None):
    """
    Creates the tables on the configured database.
    A store that cannot be reached is fatal: the error is logged and the process exits.
    """
    bind = bind or engine
    try:
        Base.metadata.create_all(bind=bind)
    except SQLAlchemyError as e:
        log.error("Database connection error: %s", e)
        sys.exit(1)
    log.info("Successfully connected to the database")


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
