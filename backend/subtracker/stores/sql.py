"""
SubTracker Backend: SQL Record Store
=======================================

What:  Async SQLAlchemy implementation of RecordStore for one model class.
How:   Wraps an AsyncSession. Every write commits before returning, so a
       success response is only built once the change is durable and a
       failed commit reaches the service as SQLAlchemyError.
"""

from typing import Generic, List, Type

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from subtracker.stores.base import RecordT


class SqlRecordStore(Generic[RecordT]):
    """
    Generic store over a single ORM model.

    Args:
        model: The SQLAlchemy model class this store manages
        session: Request-scoped async session
    """

    def __init__(self, model: Type[RecordT], session: AsyncSession):
        self.model = model
        self.session = session

    async def save(self, record: RecordT) -> RecordT:
        self.session.add(record)
        await self.session.flush()  # Assigns the autoincrement id
        await self.session.commit()
        await self.session.refresh(record)
        return record

    async def find_all(self) -> List[RecordT]:
        result = await self.session.execute(
            select(self.model).order_by(self.model.id)
        )
        return list(result.scalars().all())

    async def delete_by_id(self, record_id: int) -> bool:
        result = await self.session.execute(
            delete(self.model).where(self.model.id == record_id)
        )
        await self.session.commit()
        return result.rowcount > 0
