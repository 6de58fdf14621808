"""
Persistence port consumed by the accounting engine.

The engine never talks to SQLAlchemy directly; it is handed an object
satisfying ``CarbonStore``. ``SQLAlchemyCarbonStore`` is the production
implementation, tests use an in-memory one.
"""
from datetime import date
from decimal import Decimal
from typing import Any, Optional, Protocol
from uuid import UUID


class CarbonStore(Protocol):
    """Read/write contract of the persistence collaborator."""

    async def find_category_with_factor(self, category_id: UUID) -> Optional[Any]:
        """Category with ``emission_factor`` loaded, or None."""
        ...

    async def find_logs_by_business_and_date_range(
        self, business_id: UUID, start: date, end: date
    ) -> list[Any]:
        """Logs of a business dated within [start, end]."""
        ...

    async def find_benchmark_by_industry(self, industry: str) -> Optional[Any]:
        ...

    async def find_business_by_id(self, business_id: UUID) -> Optional[Any]:
        ...

    async def find_log_by_id(self, log_id: UUID) -> Optional[Any]:
        ...

    async def create_log(self, **fields: Any) -> Any:
        ...

    async def delete_log(self, log_id: UUID) -> bool:
        ...

    async def upsert_score(
        self, business_id: UUID, month: int, year: int, score: Decimal
    ) -> Any:
        """Insert or overwrite the cached score of a period."""
        ...

    async def find_score_history(self, business_id: UUID, limit: int) -> list[Any]:
        """Most recent cached scores, newest period first."""
        ...
