from sqlalchemy import Column, ForeignKey, String, Text
from sqlalchemy.orm import backref, relationship

from todo_app.database import Base
from todo_app.models.base import Timestamp, new_id, utcnow


class Comment(Base):
    __tablename__ = "comments"
    id = Column(String(36), primary_key=True, default=new_id)
    content = Column(Text, nullable=False)
    todo_id = Column(String(36), ForeignKey("todos.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    created_at = Column(Timestamp, nullable=False, default=utcnow)
    updated_at = Column(Timestamp, nullable=False, default=utcnow, onupdate=utcnow)

    todo = relationship("Todo", backref=backref("comments", passive_deletes=True))
    author = relationship("User")
