from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from todo_app.errors import ConflictError
from todo_app.models.reaction import Reaction
from todo_app.repositories.base import BaseRepository


class ReactionRepository(BaseRepository[Reaction]):
    def __init__(self):
        super().__init__(Reaction)

    async def add(self, db: AsyncSession, todo_id: str, user_id: str, emoji: str) -> Reaction:
        """Insert one reaction; the (todo, user, emoji) unique constraint surfaces as ConflictError."""
        try:
            return await self.create(db, Reaction(todo_id=todo_id, user_id=user_id, emoji=emoji))
        except IntegrityError as exc:
            raise ConflictError("Reaction already exists") from exc

    async def remove(self, db: AsyncSession, todo_id: str, user_id: str, emoji: str) -> bool:
        return await self.delete_where(db, todo_id=todo_id, user_id=user_id, emoji=emoji) > 0

    async def list_for_todo(self, db: AsyncSession, todo_id: str) -> list[Reaction]:
        return await self.list(
            db,
            where={"todo_id": todo_id},
            order_by=(Reaction.created_at.asc(), Reaction.id.asc()),
        )
