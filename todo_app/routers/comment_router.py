from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from todo_app.database import get_db
from todo_app.dependencies import CurrentUser, get_current_user, todo_id_param
from todo_app.errors import failure_message
from todo_app.schemas.comment import CommentCreate, CommentOut
from todo_app.services.comment_service import CommentService
from todo_app.validation import require_id

router = APIRouter()
service = CommentService()


@router.post("/{todo_id}/comments", response_model=CommentOut, status_code=201)
@failure_message("Failed to create comment")
async def create_comment(
    todo_id: str,
    comment_in: CommentCreate,
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    # content is checked (body) before the todo id
    todo_id = require_id(todo_id, "todo ID")
    return await service.create_comment(db, todo_id, user.id, comment_in.content)


@router.get("/{todo_id}/comments", response_model=list[CommentOut])
@failure_message("Failed to fetch comments")
async def list_comments(todo_id: str = Depends(todo_id_param), db: AsyncSession = Depends(get_db)):
    return await service.list_comments(db, todo_id)


@router.delete("/{todo_id}/comments/{comment_id}", status_code=204)
@failure_message("Failed to delete comment")
async def delete_comment(
    comment_id: str,
    user: CurrentUser = Depends(get_current_user),
    todo_id: str = Depends(todo_id_param),
    db: AsyncSession = Depends(get_db),
):
    # comment_id is validated only once the todo is known to exist
    await service.delete_comment(db, todo_id, comment_id, user.id)
    return Response(status_code=204)
