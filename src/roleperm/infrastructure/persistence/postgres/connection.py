"""PostgreSQL async connection pool."""

from psycopg_pool import AsyncConnectionPool

from roleperm.config import Settings


def create_pool(settings: Settings) -> AsyncConnectionPool:
    """Create async connection pool from settings.

    Pool is created with open=False. Callers await pool.open() before
    the first Unit of Work and pool.close() on shutdown.
    """
    return AsyncConnectionPool(
        conninfo=settings.database_url,
        min_size=settings.pool_min_size,
        max_size=settings.pool_max_size,
        open=False,
    )
