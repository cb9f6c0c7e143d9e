from sqlalchemy.ext.asyncio import AsyncSession

from todo_app.models.comment import Comment
from todo_app.repositories.base import BaseRepository


class CommentRepository(BaseRepository[Comment]):
    def __init__(self):
        super().__init__(Comment)

    async def list_for_todo(self, db: AsyncSession, todo_id: str) -> list[Comment]:
        return await self.list(
            db,
            where={"todo_id": todo_id},
            order_by=(Comment.created_at.desc(), Comment.id.desc()),
        )

    async def get_in_todo(self, db: AsyncSession, comment_id: str, todo_id: str) -> Comment | None:
        return await self.find_one(db, id=comment_id, todo_id=todo_id)
