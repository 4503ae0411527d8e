# server/models/user.py

from sqlalchemy import Column, String
from core.utils import new_object_id
from . import Base


# -------------------------------
# User Model
# -------------------------------

class User(Base):
    """
    Database model for exercise tracker users.
    The id is assigned by the store when the row is first flushed.
    """
    __tablename__ = "users"

    id = Column(String(24), primary_key=True, default=new_object_id)
    username = Column(String, nullable=False)

    def to_dict(self):
        return {"id": self.id, "username": self.username}
