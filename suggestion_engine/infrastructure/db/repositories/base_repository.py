"""
Base Repository for the Template Suggestion Engine

Generic async repository with the read and insert operations shared by
every table. Tables here are append-only or replaced wholesale, so there is
no generic update/delete.
"""

from typing import Any, TypeVar, Generic, Optional, Type

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from suggestion_engine.infrastructure.exceptions import DatabaseError


# Type variables for generic repository
ModelType = TypeVar("ModelType", bound=SQLModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=SQLModel)


class BaseRepository(Generic[ModelType, CreateSchemaType]):
    """
    Generic async repository.

    Args:
        model: The SQLModel class to operate on
        session: Async database session
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession):
        self._model = model
        self._session = session

    @property
    def table_name(self) -> str:
        return getattr(self._model, "__tablename__", self._model.__name__)

    async def get_by_id(self, id: Any) -> Optional[ModelType]:
        """
        Get a single record by its primary key.

        Args:
            id: Primary key value

        Returns:
            Model instance or None if not found
        """
        try:
            return await self._session.get(self._model, id)
        except SQLAlchemyError as e:
            raise DatabaseError(
                f"Failed to load {self.table_name} row",
                operation="get_by_id",
                table=self.table_name,
                original_error=e,
            ) from e

    async def create(self, data: CreateSchemaType) -> ModelType:
        """
        Create a new record.

        Args:
            data: Create schema with field values

        Returns:
            Created model instance
        """
        db_obj = self._model.model_validate(data)
        try:
            self._session.add(db_obj)
            await self._session.flush()
            await self._session.refresh(db_obj)
        except SQLAlchemyError as e:
            raise DatabaseError(
                f"Failed to insert into {self.table_name}",
                operation="create",
                table=self.table_name,
                original_error=e,
            ) from e
        return db_obj

    async def _fetch_all(self, stmt, operation: str) -> list:
        """Run a select and return every scalar row."""
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            raise DatabaseError(
                f"Query on {self.table_name} failed",
                operation=operation,
                table=self.table_name,
                original_error=e,
            ) from e
        return list(result.scalars().all())
