# eportal/services/crud_service.py

from typing import Any, Generic, Iterable, Optional, Type, TypeVar
from uuid import UUID

from fastapi import Request
from sqlmodel import SQLModel, select
from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession

from eportal.core.timeutils import utcnow
from eportal.models.user import User
from eportal.services.audit_service import record_audit, snapshot

ModelT = TypeVar("ModelT", bound=SQLModel)


class CRUDService(Generic[ModelT]):
    """
    Table-level reads and writes shared by every resource router.

    - owner_field: column holding the owning user; own-scoped callers are
      filtered on it and forced into it on create
    - actor_fields: columns defaulted to the calling user on create
      (e.g. marked_by, published_by)
    - before_create / before_update: per-resource hooks, run inside the
      transaction before the audit row is written
    """

    def __init__(
        self,
        model: Type[ModelT],
        resource: str,
        owner_field: Optional[str] = None,
        order_by: Any = None,
        actor_fields: Iterable[str] = (),
    ):
        self.model = model
        self.resource = resource
        self.owner_field = owner_field
        self.order_by = order_by
        self.actor_fields = tuple(actor_fields)

    # ------------------------
    # Reads
    # ------------------------

    def base_query(self, owner_id: Optional[UUID] = None, **filters):
        query = select(self.model)
        if owner_id is not None and self.owner_field:
            query = query.where(getattr(self.model, self.owner_field) == owner_id)
        for field, value in filters.items():
            if value is not None:
                query = query.where(getattr(self.model, field) == value)
        return query

    async def get_all(
        self,
        session: AsyncSession,
        owner_id: Optional[UUID] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        order_by: Any = None,
        **filters,
    ) -> list[ModelT]:
        query = self.base_query(owner_id, **filters)

        ordering = order_by if order_by is not None else self.order_by
        if ordering is not None:
            query = query.order_by(*ordering) if isinstance(ordering, (list, tuple)) else query.order_by(ordering)
        if offset:
            query = query.offset(offset)
        if limit:
            query = query.limit(limit)

        result = await session.execute(query)
        return list(result.scalars().all())

    async def get_by_id(
        self,
        session: AsyncSession,
        record_id: UUID,
        owner_id: Optional[UUID] = None,
    ) -> Optional[ModelT]:
        obj = await session.get(self.model, record_id)
        if obj is None:
            return None
        # someone else's row looks exactly like a missing one
        if owner_id is not None and self.owner_field and getattr(obj, self.owner_field) != owner_id:
            return None
        return obj

    async def count(self, session: AsyncSession, owner_id: Optional[UUID] = None, **filters) -> int:
        subquery = self.base_query(owner_id, **filters).subquery()
        result = await session.execute(select(func.count()).select_from(subquery))
        return result.scalar_one()

    # ------------------------
    # Hooks
    # ------------------------

    async def before_create(self, session: AsyncSession, data: dict[str, Any], actor: User) -> None:
        return None

    async def before_update(
        self,
        session: AsyncSession,
        obj: ModelT,
        changes: dict[str, Any],
        actor: User,
    ) -> None:
        return None

    # ------------------------
    # Writes
    # ------------------------

    async def create(
        self,
        session: AsyncSession,
        data: dict[str, Any],
        actor: User,
        owner_id: Optional[UUID] = None,
        request: Optional[Request] = None,
    ) -> ModelT:
        data = dict(data)

        if self.owner_field:
            if owner_id is not None:
                data[self.owner_field] = owner_id
            elif not data.get(self.owner_field):
                raise ValueError(f"{self.owner_field} is required")

        for field in self.actor_fields:
            if not data.get(field):
                data[field] = actor.id

        await self.before_create(session, data, actor)

        obj = self.model(**data)
        session.add(obj)
        await session.flush()

        record_audit(
            session,
            action="CREATE",
            entity=self.resource,
            entity_id=obj.id,
            user_id=actor.id,
            new_values=snapshot(obj),
            request=request,
        )
        await session.commit()
        await session.refresh(obj)
        return obj

    async def update(
        self,
        session: AsyncSession,
        obj: ModelT,
        changes: dict[str, Any],
        actor: User,
        request: Optional[Request] = None,
        skip_hooks: bool = False,
    ) -> ModelT:
        old_values = snapshot(obj)
        changes = dict(changes)

        # ownership never moves through an update
        if self.owner_field:
            changes.pop(self.owner_field, None)

        if not skip_hooks:
            await self.before_update(session, obj, changes, actor)

        for field, value in changes.items():
            setattr(obj, field, value)
        if "updated_at" in self.model.model_fields:
            obj.updated_at = utcnow()
        session.add(obj)
        await session.flush()

        record_audit(
            session,
            action="UPDATE",
            entity=self.resource,
            entity_id=obj.id,
            user_id=actor.id,
            old_values=old_values,
            new_values=snapshot(obj),
            request=request,
        )
        await session.commit()
        await session.refresh(obj)
        return obj

    async def delete(
        self,
        session: AsyncSession,
        obj: ModelT,
        actor: User,
        request: Optional[Request] = None,
    ) -> None:
        old_values = snapshot(obj)
        await session.delete(obj)
        record_audit(
            session,
            action="DELETE",
            entity=self.resource,
            entity_id=obj.id,
            user_id=actor.id,
            old_values=old_values,
            request=request,
        )
        await session.commit()
