from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from todo_app.database import get_db
from todo_app.dependencies import CurrentUser, get_current_user, todo_id_param
from todo_app.errors import failure_message
from todo_app.schemas.reaction import ReactionIn, ReactionOut
from todo_app.services.reaction_service import ReactionService

router = APIRouter()
service = ReactionService()


@router.post("/{todo_id}/reactions", response_model=ReactionOut, status_code=201)
@failure_message("Failed to add reaction")
async def add_reaction(
    reaction_in: ReactionIn,
    user: CurrentUser = Depends(get_current_user),
    todo_id: str = Depends(todo_id_param),
    db: AsyncSession = Depends(get_db),
):
    return await service.add_reaction(db, todo_id, user.id, reaction_in.emoji)


@router.get("/{todo_id}/reactions", response_model=list[ReactionOut])
@failure_message("Failed to fetch reactions")
async def list_reactions(todo_id: str = Depends(todo_id_param), db: AsyncSession = Depends(get_db)):
    return await service.list_reactions(db, todo_id)


@router.delete("/{todo_id}/reactions", status_code=204)
@failure_message("Failed to remove reaction")
async def remove_reaction(
    reaction_in: ReactionIn,
    user: CurrentUser = Depends(get_current_user),
    todo_id: str = Depends(todo_id_param),
    db: AsyncSession = Depends(get_db),
):
    await service.remove_reaction(db, todo_id, user.id, reaction_in.emoji)
    return Response(status_code=204)
