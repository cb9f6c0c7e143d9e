from sqlalchemy.ext.asyncio import AsyncSession

from todo_app.errors import NotFound
from todo_app.models.comment import Comment
from todo_app.models.todo import Todo
from todo_app.repositories.comment_repo import CommentRepository
from todo_app.repositories.todo_repo import TodoRepository
from todo_app.validation import require_id


class CommentService:
    def __init__(self):
        self.repo = CommentRepository()
        self.todos = TodoRepository()

    async def _require_todo(self, db: AsyncSession, todo_id: str) -> Todo:
        todo = await self.todos.get(db, todo_id)
        if todo is None:
            raise NotFound("Todo not found")
        return todo

    async def create_comment(self, db: AsyncSession, todo_id: str, author_id: str, content: str) -> Comment:
        async with db.begin():
            await self._require_todo(db, todo_id)
            return await self.repo.create(db, Comment(content=content, todo_id=todo_id, user_id=author_id))

    async def list_comments(self, db: AsyncSession, todo_id: str) -> list[Comment]:
        async with db.begin():
            await self._require_todo(db, todo_id)
            return await self.repo.list_for_todo(db, todo_id)

    async def delete_comment(self, db: AsyncSession, todo_id: str, comment_id: str, caller_id: str) -> None:
        """The comment's author or the todo's owner may delete it; anyone else gets a 404."""
        async with db.begin():
            todo = await self._require_todo(db, todo_id)
            comment_id = require_id(comment_id, "comment ID")
            comment = await self.repo.get_in_todo(db, comment_id, todo_id)
            if comment is None or caller_id not in (comment.user_id, todo.user_id):
                raise NotFound("Comment not found")
            await self.repo.delete_where(db, id=comment_id)
