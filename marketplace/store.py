"""Row store over an async SQLAlchemy session.

Every write the booking services perform goes through one of these calls,
and each call is a single statement. Driver and ORM failures surface as
``StorageError``; nothing here retries.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, TypeVar

from sqlalchemy import ColumnElement, delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.core.exceptions import StorageError
from marketplace.database import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class Store:
    """Table-like access to persisted rows."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def insert(self, row: ModelT) -> ModelT:
        """Insert a row and load its identity and server defaults."""
        try:
            self.session.add(row)
            await self.session.flush()
            await self.session.refresh(row)
        except SQLAlchemyError as e:
            raise self._storage_error("insert", row.__tablename__, e) from e
        return row

    async def update_conditional(
        self,
        model: type[ModelT],
        identity: int,
        expected: Sequence[ColumnElement[bool]],
        values: dict[str, Any],
    ) -> int:
        """Update one row only if it still matches ``expected``.

        Returns:
            Number of rows the database reports as changed (0 or 1)
        """
        stmt = (
            update(model)
            .where(model.id == identity, *expected)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise self._storage_error("update", model.__tablename__, e) from e
        return result.rowcount

    async def get(self, model: type[ModelT], identity: int) -> ModelT | None:
        """Fetch a row by id, bypassing any stale copy in the session."""
        try:
            return await self.session.get(model, identity, populate_existing=True)
        except SQLAlchemyError as e:
            raise self._storage_error("get", model.__tablename__, e) from e

    async def list(
        self,
        model: type[ModelT],
        *criteria: ColumnElement[bool],
        order_by: Sequence[Any] = (),
    ) -> list[ModelT]:
        """Return all rows matching every criterion."""
        query = select(model)
        if criteria:
            query = query.where(*criteria)
        if order_by:
            query = query.order_by(*order_by)
        try:
            result = await self.session.execute(query)
        except SQLAlchemyError as e:
            raise self._storage_error("list", model.__tablename__, e) from e
        return list(result.unique().scalars().all())

    async def delete(self, model: type[ModelT], identity: int) -> int:
        stmt = (
            delete(model)
            .where(model.id == identity)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise self._storage_error("delete", model.__tablename__, e) from e
        return result.rowcount

    @staticmethod
    def _storage_error(operation: str, table: str, exc: SQLAlchemyError) -> StorageError:
        logger.error(f"Storage {operation} on '{table}' failed: {exc}")
        return StorageError(f"{operation} on {table} failed")
