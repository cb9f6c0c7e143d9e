from sqlalchemy.ext.asyncio import AsyncSession

from todo_app.errors import NotFound
from todo_app.models.reaction import Reaction
from todo_app.repositories.reaction_repo import ReactionRepository
from todo_app.repositories.todo_repo import TodoRepository


class ReactionService:
    def __init__(self):
        self.repo = ReactionRepository()
        self.todos = TodoRepository()

    async def _require_todo(self, db: AsyncSession, todo_id: str) -> None:
        if not await self.todos.exists(db, id=todo_id):
            raise NotFound("Todo not found")

    async def add_reaction(self, db: AsyncSession, todo_id: str, user_id: str, emoji: str) -> Reaction:
        async with db.begin():
            await self._require_todo(db, todo_id)
            return await self.repo.add(db, todo_id, user_id, emoji)

    async def remove_reaction(self, db: AsyncSession, todo_id: str, user_id: str, emoji: str) -> None:
        async with db.begin():
            await self._require_todo(db, todo_id)
            if not await self.repo.remove(db, todo_id, user_id, emoji):
                raise NotFound("Reaction not found")

    async def list_reactions(self, db: AsyncSession, todo_id: str) -> list[Reaction]:
        async with db.begin():
            await self._require_todo(db, todo_id)
            return await self.repo.list_for_todo(db, todo_id)
