from sqlalchemy import Boolean, Column, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from todo_app.database import Base
from todo_app.models.base import Timestamp, new_id, utcnow


class Todo(Base):
    __tablename__ = "todos"
    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    completed = Column(Boolean, nullable=False, default=False)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(Timestamp, nullable=False, default=utcnow, index=True)
    updated_at = Column(Timestamp, nullable=False, default=utcnow, onupdate=utcnow)

    owner = relationship("User", backref="todos")
