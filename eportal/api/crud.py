# eportal/api/crud.py

from contextlib import contextmanager
from typing import Iterable, List, Type
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from eportal.api.deps import get_db_session
from eportal.core.rbac import Access, RequireAccess
from eportal.services.crud_service import CRUDService

ALL_OPERATIONS = ("list", "get", "create", "update", "delete")


@contextmanager
def service_errors():
    """Map service-layer exceptions onto HTTP errors."""
    try:
        yield
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e).strip("'\""))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


async def get_or_404(service: CRUDService, session: AsyncSession, record_id: UUID, access: Access, entity_name: str):
    obj = await service.get_by_id(session, record_id, owner_id=access.owner_id)
    if not obj:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{entity_name} not found")
    return obj


def add_crud_routes(
    router: APIRouter,
    service: CRUDService,
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
    read_schema: Type[BaseModel],
    entity_name: str,
    operations: Iterable[str] = ALL_OPERATIONS,
    create_action: str = "create",
) -> APIRouter:
    """
    Register list / get / create / update / delete on router for one resource.

    Must be called after the router's own fixed-path routes, otherwise
    "/{record_id}" shadows them.
    """
    resource = service.resource
    operations = set(operations)

    if "list" in operations:
        @router.get("", response_model=List[read_schema])
        async def list_records(
            limit: int = Query(100, ge=1, le=500),
            offset: int = Query(0, ge=0),
            session: AsyncSession = Depends(get_db_session),
            access: Access = Depends(RequireAccess("view", resource)),
        ):
            return await service.get_all(session, owner_id=access.owner_id, limit=limit, offset=offset)

    if "get" in operations:
        @router.get("/{record_id}", response_model=read_schema)
        async def get_record(
            record_id: UUID,
            session: AsyncSession = Depends(get_db_session),
            access: Access = Depends(RequireAccess("view", resource)),
        ):
            return await get_or_404(service, session, record_id, access, entity_name)

    if "create" in operations:
        @router.post("", response_model=read_schema, status_code=status.HTTP_201_CREATED)
        async def create_record(
            data: create_schema,
            request: Request,
            session: AsyncSession = Depends(get_db_session),
            access: Access = Depends(RequireAccess(create_action, resource)),
        ):
            with service_errors():
                return await service.create(
                    session,
                    data.model_dump(exclude_none=True),
                    actor=access.user,
                    owner_id=access.owner_id,
                    request=request,
                )

    if "update" in operations:
        @router.put("/{record_id}", response_model=read_schema)
        async def update_record(
            record_id: UUID,
            data: update_schema,
            request: Request,
            session: AsyncSession = Depends(get_db_session),
            access: Access = Depends(RequireAccess("update", resource)),
        ):
            obj = await get_or_404(service, session, record_id, access, entity_name)
            with service_errors():
                return await service.update(
                    session, obj, data.model_dump(exclude_unset=True), actor=access.user, request=request
                )

    if "delete" in operations:
        @router.delete("/{record_id}")
        async def delete_record(
            record_id: UUID,
            request: Request,
            session: AsyncSession = Depends(get_db_session),
            access: Access = Depends(RequireAccess("delete", resource)),
        ):
            obj = await get_or_404(service, session, record_id, access, entity_name)
            await service.delete(session, obj, actor=access.user, request=request)
            return {"success": True}

    return router
