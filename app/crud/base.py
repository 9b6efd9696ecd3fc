"""Generic async CRUD helpers."""
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=Union[BaseModel, dict])
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=Union[BaseModel, dict])


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """Default create/read/update/delete operations for a model."""

    def __init__(self, model: Type[ModelType]):
        self.model = model

    def _apply_filters(self, query, filters: Optional[Dict[str, Any]]):
        for field, value in (filters or {}).items():
            query = query.where(getattr(self.model, field) == value)
        return query

    async def get(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        """Get a single row by primary key."""
        return await db.get(self.model, id)

    async def get_multi(
        self,
        db: AsyncSession,
        *,
        skip: int = 0,
        limit: int = 100,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[ModelType]:
        """List rows ordered by primary key."""
        query = self._apply_filters(select(self.model), filters)
        query = query.order_by(self.model.id).offset(skip).limit(limit)
        result = await db.execute(query)
        return list(result.scalars().all())

    async def count(self, db: AsyncSession, *, filters: Optional[Dict[str, Any]] = None) -> int:
        """Count rows matching the filters."""
        query = self._apply_filters(select(func.count()).select_from(self.model), filters)
        result = await db.execute(query)
        return result.scalar_one()

    async def create(self, db: AsyncSession, *, obj_in: CreateSchemaType) -> ModelType:
        """Insert a row from a schema or dict."""
        data = obj_in if isinstance(obj_in, dict) else obj_in.model_dump(exclude_unset=True)
        db_obj = self.model(**data)
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def update(
        self,
        db: AsyncSession,
        *,
        db_obj: ModelType,
        obj_in: Union[UpdateSchemaType, Dict[str, Any]],
    ) -> ModelType:
        """Apply the set fields of a schema or dict to a row."""
        update_data = obj_in if isinstance(obj_in, dict) else obj_in.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(db_obj, field, value)
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def remove(self, db: AsyncSession, *, id: Any) -> Optional[ModelType]:
        """Delete a row by primary key, returning it if it existed."""
        db_obj = await db.get(self.model, id)
        if db_obj is not None:
            await db.delete(db_obj)
            await db.commit()
        return db_obj
