from sqlalchemy import Column, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import backref, relationship

from todo_app.database import Base
from todo_app.models.base import Timestamp, new_id, utcnow


class Reaction(Base):
    __tablename__ = "reactions"
    id = Column(String(36), primary_key=True, default=new_id)
    todo_id = Column(String(36), ForeignKey("todos.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    emoji = Column(String(32), nullable=False)
    created_at = Column(Timestamp, nullable=False, default=utcnow)

    todo = relationship("Todo", backref=backref("reactions", passive_deletes=True))
    user = relationship("User")

    # one reaction per user per emoji on a todo
    __table_args__ = (
        UniqueConstraint("todo_id", "user_id", "emoji", name="uq_reaction_todo_user_emoji"),
    )
