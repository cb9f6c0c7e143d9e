from typing import Optional, Union

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from todo_app.database import get_db
from todo_app.dependencies import CurrentUser, PageParams, get_current_user, page_params, todo_id_param
from todo_app.errors import failure_message
from todo_app.schemas.todo import TodoCreate, TodoOut, TodoPage, TodoUpdate
from todo_app.services.todo_service import TodoService

router = APIRouter()
service = TodoService()


@router.get("", response_model=Union[TodoPage, list[TodoOut]])
@failure_message("Failed to fetch todos")
async def list_todos(
    user: CurrentUser = Depends(get_current_user),
    paging: Optional[PageParams] = Depends(page_params),
    db: AsyncSession = Depends(get_db),
):
    if paging is None:
        return await service.list_todos(db, user.id)
    return await service.list_todos_page(db, user.id, paging.page, paging.limit)


@router.get("/{todo_id}", response_model=TodoOut)
@failure_message("Failed to fetch todo")
async def get_todo(
    user: CurrentUser = Depends(get_current_user),
    todo_id: str = Depends(todo_id_param),
    db: AsyncSession = Depends(get_db),
):
    return await service.get_todo(db, todo_id, user.id)


@router.post("", response_model=TodoOut, status_code=201)
@failure_message("Failed to create todo")
async def create_todo(
    todo_in: TodoCreate,
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await service.create_todo(db, user.id, todo_in)


@router.put("/{todo_id}", response_model=TodoOut)
@failure_message("Failed to update todo")
async def update_todo(
    todo_in: TodoUpdate,
    user: CurrentUser = Depends(get_current_user),
    todo_id: str = Depends(todo_id_param),
    db: AsyncSession = Depends(get_db),
):
    return await service.update_todo(db, todo_id, user.id, todo_in)


@router.delete("/{todo_id}", response_model=list[TodoOut])
@failure_message("Failed to delete todo")
async def delete_todo(
    user: CurrentUser = Depends(get_current_user),
    todo_id: str = Depends(todo_id_param),
    db: AsyncSession = Depends(get_db),
):
    return await service.delete_todo(db, todo_id, user.id)
