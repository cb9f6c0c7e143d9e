import math

from sqlalchemy.ext.asyncio import AsyncSession

from todo_app.errors import NotFound
from todo_app.models.todo import Todo
from todo_app.repositories.todo_repo import TodoRepository
from todo_app.schemas.todo import TodoCreate, TodoUpdate


class TodoService:
    def __init__(self):
        self.repo = TodoRepository()

    async def list_todos(self, db: AsyncSession, owner_id: str) -> list[Todo]:
        async with db.begin():
            return await self.repo.list_owned(db, owner_id)

    async def list_todos_page(self, db: AsyncSession, owner_id: str, page: int, limit: int) -> dict:
        async with db.begin():
            total = await self.repo.count_owned(db, owner_id)
            items = await self.repo.list_owned(db, owner_id, limit=limit, offset=(page - 1) * limit)
        return {
            "items": items,
            "pagination": {
                "current_page": page,
                "total_pages": math.ceil(total / limit),
                "total_count": total,
                "limit": limit,
            },
        }

    async def get_todo(self, db: AsyncSession, todo_id: str, owner_id: str) -> Todo:
        async with db.begin():
            todo = await self.repo.get_owned(db, todo_id, owner_id)
        if todo is None:
            raise NotFound("Todo not found")
        return todo

    async def create_todo(self, db: AsyncSession, owner_id: str, todo_in: TodoCreate) -> Todo:
        todo = Todo(title=todo_in.title, description=todo_in.description, user_id=owner_id)
        async with db.begin():
            return await self.repo.create(db, todo)

    async def update_todo(self, db: AsyncSession, todo_id: str, owner_id: str, todo_in: TodoUpdate) -> Todo:
        async with db.begin():
            todo = await self.repo.get_owned(db, todo_id, owner_id)
            if todo is None:
                raise NotFound("Todo not found")
            return await self.repo.update_fields(db, todo, todo_in.changes())

    async def delete_todo(self, db: AsyncSession, todo_id: str, owner_id: str) -> list[Todo]:
        """Delete and relist in one transaction so the returned list is consistent."""
        async with db.begin():
            if not await self.repo.delete_owned(db, todo_id, owner_id):
                raise NotFound("Todo not found")
            return await self.repo.list_owned(db, owner_id)
