"""Database service classes for the key-value store."""

from __future__ import annotations

from typing import Any, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db.schemas.store import StoredValue


class KeyValueService:
    """Reads and writes JSON values keyed by a fixed string."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, key: str, *, for_update: bool = False) -> Optional[Any]:
        stmt = select(StoredValue).where(StoredValue.key == key)
        if for_update:
            # ignored by SQLite, row lock elsewhere; reload over any cached row
            stmt = stmt.with_for_update().execution_options(populate_existing=True)
        result = await self.session.execute(stmt)
        row = result.scalar_one_or_none()
        return row.value if row else None

    async def put(self, key: str, value: Any) -> None:
        result = await self.session.execute(
            select(StoredValue).where(StoredValue.key == key)
        )
        row = result.scalar_one_or_none()
        if row:
            row.value = value
        else:
            self.session.add(StoredValue(key=key, value=value))
        await self.session.commit()

    async def delete(self, key: str) -> None:
        await self.session.execute(delete(StoredValue).where(StoredValue.key == key))
        await self.session.commit()
