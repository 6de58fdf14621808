"""
Repository for ActivityCategory and EmissionFactor database operations.
"""
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from carbon_tracker.database.repositories.base import BaseRepository
from carbon_tracker.database.schemas import (
    ActivityCategoryDBModel,
    EmissionFactorDBModel,
)


class ActivityCategoryRepository(BaseRepository[ActivityCategoryDBModel]):
    """Repository for the emission category catalog."""

    def __init__(self, session: AsyncSession):
        super().__init__(ActivityCategoryDBModel, session)

    async def get_with_factor(
        self, category_id: UUID
    ) -> Optional[ActivityCategoryDBModel]:
        """
        Get a category with its emission factor loaded.

        The factor is None when the catalog is inconsistent; callers decide
        how to report that.
        """
        return await self.get_by_id(category_id)

    async def get_by_name(self, name: str) -> Optional[ActivityCategoryDBModel]:
        """Get a category by its unique name."""
        stmt = select(self.model).where(self.model.name == name)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get_all_ordered(self) -> List[ActivityCategoryDBModel]:
        """Get every category, Scope 1 first, then by name."""
        stmt = select(self.model).order_by(self.model.scope, self.model.name)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_scope(self, scope: int) -> List[ActivityCategoryDBModel]:
        """
        Get categories in a GHG scope.

        Args:
            scope: GHG Protocol scope (1, 2, or 3)

        Returns:
            Categories in the scope ordered by name
        """
        stmt = (
            select(self.model)
            .where(self.model.scope == scope)
            .order_by(self.model.name)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def upsert_with_factor(
        self,
        name: str,
        unit: str,
        scope: int,
        description: Optional[str],
        factor: Decimal,
        factor_unit: str,
        source: Optional[str],
    ) -> ActivityCategoryDBModel:
        """
        Create a category and its factor, or refresh the factor of an existing one.

        The scope of an existing category is left untouched since logs already
        carry a frozen copy of it.
        """
        category = await self.get_by_name(name)
        if category is None:
            category = await self.create(
                name=name, unit=unit, scope=scope, description=description
            )
            emission_factor = None
        else:
            category.unit = unit
            category.description = description
            emission_factor = category.emission_factor

        if emission_factor is None:
            self.session.add(
                EmissionFactorDBModel(
                    category_id=category.id,
                    factor=factor,
                    unit=factor_unit,
                    source=source,
                )
            )
        else:
            category.emission_factor.factor = factor
            category.emission_factor.unit = factor_unit
            category.emission_factor.source = source

        await self.session.flush()
        await self.session.refresh(category, attribute_names=["emission_factor"])
        return category
