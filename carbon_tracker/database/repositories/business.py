"""
Repository for Business database operations.
"""
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from carbon_tracker.database.repositories.base import BaseRepository
from carbon_tracker.database.schemas import BusinessDBModel


class BusinessRepository(BaseRepository[BusinessDBModel]):
    """Repository for business profile operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(BusinessDBModel, session)

    async def get_by_user_id(self, user_id: UUID) -> Optional[BusinessDBModel]:
        """
        Get the profile owned by a user account.

        Args:
            user_id: User account UUID

        Returns:
            Business if the user has a profile, None otherwise
        """
        stmt = select(self.model).where(self.model.user_id == user_id)
        result = await self.session.execute(stmt)
        return result.scalars().first()
