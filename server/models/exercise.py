# server/models/exercise.py

from sqlalchemy import Column, Float, String, Text
from core.utils import new_object_id, as_number
from . import Base


class Exercise(Base):
    __tablename__ = "exercises"

    id = Column(String(24), primary_key=True, default=new_object_id)
    description = Column(Text)
    duration = Column(Float)
    date = Column(String, index=True)
    # Back-reference only; the user is not required to exist
    user_id = Column(String(24), index=True)

    def to_log_entry(self):
        return {
            "description": self.description,
            "duration": as_number(self.duration),
            "date": self.date,
        }
