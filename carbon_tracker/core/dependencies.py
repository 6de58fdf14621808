"""
FastAPI dependencies.
"""
from typing import Any, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from carbon_tracker.database.session_manager.db_session import Database
from carbon_tracker.database.store import SQLAlchemyCarbonStore
from carbon_tracker.utils.constants import (
    DEFAULT_TREND_MONTHS,
    MAX_TREND_MONTHS,
    SCORE_HISTORY_LIMIT,
)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield a request-scoped session, committed when the request succeeds."""
    async with Database() as session:
        yield session


async def get_carbon_store(
    session: AsyncSession = Depends(get_db_session),
) -> SQLAlchemyCarbonStore:
    """Persistence port bound to the request session."""
    return SQLAlchemyCarbonStore(session)


def get_analytics_settings(request: Request) -> dict[str, Any]:
    """``[analytics]`` section of the app config, with defaults filled in."""
    section = request.app.state.config.section("analytics")
    return {
        "default_trend_months": section.get("default_trend_months", DEFAULT_TREND_MONTHS),
        "max_trend_months": section.get("max_trend_months", MAX_TREND_MONTHS),
        "score_history_limit": section.get("score_history_limit", SCORE_HISTORY_LIMIT),
    }
