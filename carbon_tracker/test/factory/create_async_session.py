"""
Session maker shared by the test factories.
"""
from carbon_tracker.database.session_manager.db_session import Database


class LazySessionMaker:
    """
    Resolve Database's session maker on each call.

    ``Database.init`` runs per test in conftest, so the maker cannot be
    captured at import time.
    """

    def __call__(self):
        if Database._async_session_maker is None:
            raise RuntimeError(
                "Database not initialized. Call Database.init() in conftest first."
            )
        return Database._async_session_maker()


async_session = LazySessionMaker()
