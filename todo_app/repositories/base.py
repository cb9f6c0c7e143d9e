from __future__ import annotations

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import delete as sa_delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.inspection import inspect as sa_inspect

T = TypeVar("T")  # SQLAlchemy model class (Declarative)


class BaseRepository(Generic[T]):
    """
    Shared async repository for one model.
    - Only model instances are accepted on write (no dicts / pydantic objects).
    - Commit/rollback belongs to the caller (the service opens the transaction).
    """

    def __init__(self, model: type[T]) -> None:
        self.model = model

    # ------------------------ Read ------------------------

    async def get(self, session: AsyncSession, pk: Any) -> T | None:
        return await session.get(self.model, pk)

    async def find_one(self, session: AsyncSession, **filters: Any) -> T | None:
        """First row matching every equality filter, or None."""
        stmt = select(self.model).filter_by(**filters).limit(1)
        res = await session.execute(stmt)
        return res.scalars().first()

    async def exists(self, session: AsyncSession, **filters: Any) -> bool:
        stmt = select(func.count()).select_from(self.model).filter_by(**filters)
        res = await session.execute(stmt)
        return int(res.scalar_one()) > 0

    async def list(
        self,
        session: AsyncSession,
        *,
        where: dict[str, Any] | None = None,
        order_by: Sequence[Any] | None = None,
        limit: int | None = None,
        offset: int | None = 0,
    ) -> list[T]:
        stmt = select(self.model)
        if where:
            stmt = stmt.filter_by(**where)
        if order_by:
            stmt = stmt.order_by(*order_by)
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset:
            stmt = stmt.offset(offset)
        res = await session.execute(stmt)
        return list(res.scalars().all())

    async def count(self, session: AsyncSession, **filters: Any) -> int:
        stmt = select(func.count()).select_from(self.model)
        if filters:
            stmt = stmt.filter_by(**filters)
        res = await session.execute(stmt)
        return int(res.scalar_one())

    # ------------------------ Write ------------------------

    async def create(self, session: AsyncSession, obj: T) -> T:
        """
        Insert a new row.
        - transient (not yet in a session): add -> flush, defaults and PK are populated
        - anything else is rejected so that updates go through update_fields()
        """
        state = sa_inspect(obj)
        if not state.transient:
            raise ValueError("create(): expected a transient (new) SQLAlchemy model instance")
        session.add(obj)
        await session.flush()
        await session.refresh(obj)
        return obj

    async def update_fields(self, session: AsyncSession, obj: T, values: dict[str, Any]) -> T:
        """Partial update of a persistent row: only keys present in ``values`` change."""
        pk_names = {c.key for c in sa_inspect(self.model).primary_key}
        for name, value in values.items():
            if name in pk_names:
                raise ValueError(f"update_fields(): primary key '{name}' cannot be changed")
            setattr(obj, name, value)
        await session.flush()
        await session.refresh(obj)
        return obj

    async def delete_where(self, session: AsyncSession, **filters: Any) -> int:
        """Bulk delete by equality filters; returns the affected row count."""
        stmt = sa_delete(self.model).filter_by(**filters)
        res = await session.execute(stmt)
        return res.rowcount or 0
