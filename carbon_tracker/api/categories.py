"""
Activity Categories API router.

Read-only access to the emission category catalog.
"""

import logging
from itertools import groupby
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from carbon_tracker.core.dependencies import get_db_session
from carbon_tracker.core.exceptions import InvalidInputError, NotFoundError
from carbon_tracker.database.repositories import ActivityCategoryRepository
from carbon_tracker.pydantic_models.activity_category import (
    ActivityCategoryPydModel,
    CategoryCatalog,
    ScopeCategories,
)
from carbon_tracker.utils.constants import SCOPE_NAMES, Scope

router = APIRouter(
    prefix="/api/v1/categories",
    tags=["Categories"],
)

logger = logging.getLogger(__name__)


@router.get("", response_model=CategoryCatalog)
async def list_categories(session: AsyncSession = Depends(get_db_session)):
    """List every category with its emission factor, grouped by scope."""
    repo = ActivityCategoryRepository(session)
    categories = await repo.get_all_ordered()

    scopes = [
        ScopeCategories(
            scope=scope,
            scope_name=SCOPE_NAMES[scope],
            categories=[
                ActivityCategoryPydModel.model_validate(category) for category in group
            ],
        )
        for scope, group in groupby(categories, key=lambda category: category.scope)
    ]
    return CategoryCatalog(total=len(categories), scopes=scopes)


@router.get("/scope/{scope}", response_model=ScopeCategories)
async def list_categories_by_scope(
    scope: int,
    session: AsyncSession = Depends(get_db_session),
):
    """
    List the categories of one GHG scope.

    Example:
        ```
        GET /api/v1/categories/scope/1
        ```
    """
    if scope not in Scope.ALL:
        raise InvalidInputError("Scope must be 1, 2, or 3", scope=scope)

    repo = ActivityCategoryRepository(session)
    categories = await repo.get_by_scope(scope)
    return ScopeCategories(
        scope=scope,
        scope_name=SCOPE_NAMES[scope],
        categories=[
            ActivityCategoryPydModel.model_validate(category)
            for category in categories
        ],
    )


@router.get("/{category_id}", response_model=ActivityCategoryPydModel)
async def get_category(
    category_id: UUID,
    session: AsyncSession = Depends(get_db_session),
):
    """Get a category with its emission factor."""
    repo = ActivityCategoryRepository(session)
    category = await repo.get_with_factor(category_id)

    if category is None:
        raise NotFoundError(
            f"Category not found: {category_id}", category_id=category_id
        )

    return category
