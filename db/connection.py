"""
db/connection.py
----------------
Manages the PostgreSQL connection pool and runs parameterized queries.
Uses psycopg2's SimpleConnectionPool for efficient connection reuse.

Queries throughout the app are written with PostgreSQL positional
placeholders (``$1``, ``$2``, ...). psycopg2 only understands ``%s``, so
`query()` rewrites them with `to_pyformat()` before executing.
"""

import re
from typing import Any, Sequence

import psycopg2
from psycopg2 import pool, extras

from config import DATABASE_URL, DB_POOL_MAX, DB_POOL_MIN
from utils.logger import get_logger

logger = get_logger(__name__)

_pool: pool.SimpleConnectionPool | None = None

_PLACEHOLDER_RE = re.compile(r"\$(\d+)")


def init_pool(
    min_conn: int = DB_POOL_MIN, max_conn: int = DB_POOL_MAX, dsn: str = DATABASE_URL
) -> None:
    """
    Initialize the database connection pool.

    Args:
        min_conn: Minimum number of connections to keep open.
        max_conn: Maximum number of connections allowed.
        dsn: Connection URL; defaults to the configured DATABASE_URL.

    Raises:
        psycopg2.OperationalError: If the database is unreachable.
    """
    global _pool
    if _pool is not None:
        return
    try:
        _pool = pool.SimpleConnectionPool(min_conn, max_conn, dsn)
        logger.info("Database connection pool initialized successfully.")
    except psycopg2.OperationalError as e:
        logger.error(f"Failed to initialize database pool: {e}")
        raise


def get_connection():
    """
    Get a connection from the pool.

    Raises:
        RuntimeError: If the pool has not been initialized.
    """
    if _pool is None:
        raise RuntimeError("Database pool not initialized. Call init_pool() first.")
    return _pool.getconn()


def release_connection(conn) -> None:
    """Return a connection back to the pool."""
    if _pool is not None:
        _pool.putconn(conn)


def close_pool() -> None:
    """Close all connections in the pool."""
    global _pool
    if _pool is not None:
        _pool.closeall()
        _pool = None
        logger.info("Database connection pool closed.")


def to_pyformat(sql: str, values: Sequence[Any]) -> tuple[str, list]:
    """
    Rewrite ``$N`` placeholders into psycopg2's ``%s`` style.

    When the statement has placeholders, literal ``%`` characters are
    doubled so psycopg2 does not read them as format markers, and the
    values are reordered to follow the order in which placeholders appear
    in the text (a placeholder may appear more than once).

    Example:
        to_pyformat("UPDATE t SET a=$1 WHERE id = $2", ["x", 7])
        -> ("UPDATE t SET a=%s WHERE id = %s", ["x", 7])

    Raises:
        ValueError: If a placeholder refers past the end of ``values``.
    """
    if not _PLACEHOLDER_RE.search(sql):
        return sql, []

    ordered: list = []

    def _replace(match: re.Match) -> str:
        index = int(match.group(1))
        if index < 1 or index > len(values):
            raise ValueError(
                f"Placeholder ${index} has no value ({len(values)} supplied)"
            )
        ordered.append(values[index - 1])
        return "%s"

    converted = _PLACEHOLDER_RE.sub(_replace, sql.replace("%", "%%"))
    return converted, ordered


def query(sql: str, values: Sequence[Any] = ()) -> list[dict]:
    """
    Execute one parameterized statement and commit.

    Args:
        sql: Statement using ``$N`` positional placeholders.
        values: Values bound to ``$1..$N`` in order.

    Returns:
        The result rows as dicts keyed by column name; an empty list for
        statements that produce no result set.

    Raises:
        Any psycopg2 error, after rolling the transaction back.
    """
    text, params = to_pyformat(sql, values)
    logger.debug(f"SQL: {' '.join(text.split())} | params={params}")
    conn = get_connection()
    try:
        with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
            cur.execute(text, params or None)
            rows = [dict(r) for r in cur.fetchall()] if cur.description else []
        conn.commit()
        return rows
    except Exception as e:
        conn.rollback()
        logger.error(f"Query failed: {e}")
        raise
    finally:
        release_connection(conn)
