from sqlalchemy.ext.asyncio import AsyncSession

from todo_app.models.comment import Comment
from todo_app.models.reaction import Reaction
from todo_app.models.todo import Todo
from todo_app.repositories.base import BaseRepository

NEWEST_FIRST = (Todo.created_at.desc(), Todo.id.desc())


class TodoRepository(BaseRepository[Todo]):
    """Todo access is always owner-scoped: id and user_id are matched together."""

    def __init__(self):
        super().__init__(Todo)

    async def get_owned(self, db: AsyncSession, todo_id: str, owner_id: str) -> Todo | None:
        return await self.find_one(db, id=todo_id, user_id=owner_id)

    async def list_owned(self, db: AsyncSession, owner_id: str, *, limit=None, offset=0) -> list[Todo]:
        return await self.list(
            db, where={"user_id": owner_id}, order_by=NEWEST_FIRST, limit=limit, offset=offset
        )

    async def count_owned(self, db: AsyncSession, owner_id: str) -> int:
        return await self.count(db, user_id=owner_id)

    async def delete_owned(self, db: AsyncSession, todo_id: str, owner_id: str) -> bool:
        if not await self.exists(db, id=todo_id, user_id=owner_id):
            return False
        # children first so the delete also works where FK cascades are not enforced
        await db.execute(Comment.__table__.delete().where(Comment.todo_id == todo_id))
        await db.execute(Reaction.__table__.delete().where(Reaction.todo_id == todo_id))
        return await self.delete_where(db, id=todo_id, user_id=owner_id) > 0
