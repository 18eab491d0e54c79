"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.connection import get_connection, release_connection
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Companies: employers that post jobs, keyed by a short handle
CREATE TABLE IF NOT EXISTS companies (
    handle          VARCHAR(25) PRIMARY KEY CHECK (handle = lower(handle)),
    name            TEXT UNIQUE NOT NULL,
    num_employees   INTEGER CHECK (num_employees >= 0),
    description     TEXT NOT NULL,
    logo_url        TEXT
);

-- Jobs: openings owned by a company
CREATE TABLE IF NOT EXISTS jobs (
    id              SERIAL PRIMARY KEY,
    title           TEXT NOT NULL,
    salary          INTEGER CHECK (salary >= 0),
    equity          NUMERIC CHECK (equity <= 1.0),
    company_handle  VARCHAR(25) NOT NULL
                    REFERENCES companies ON DELETE CASCADE
);

-- Users: accounts; is_admin gates the mutation routes
CREATE TABLE IF NOT EXISTS users (
    username        VARCHAR(25) PRIMARY KEY,
    password        TEXT NOT NULL,
    first_name      TEXT NOT NULL,
    last_name       TEXT NOT NULL,
    email           TEXT NOT NULL CHECK (position('@' IN email) > 1),
    is_admin        BOOLEAN NOT NULL DEFAULT FALSE
);

-- Applications: which user applied to which job
CREATE TABLE IF NOT EXISTS applications (
    username        VARCHAR(25) REFERENCES users ON DELETE CASCADE,
    job_id          INTEGER REFERENCES jobs ON DELETE CASCADE,
    PRIMARY KEY (username, job_id)
);

CREATE INDEX IF NOT EXISTS idx_jobs_company ON jobs(company_handle);
"""

# Child tables first so foreign keys never block the delete.
_TABLES = ("applications", "jobs", "users", "companies")


def create_tables() -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    conn = get_connection()
    try:
        with conn.cursor() as cur:
            cur.execute(SCHEMA_SQL)
        conn.commit()
        logger.info("Database schema initialized successfully.")
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to initialize schema: {e}")
        raise
    finally:
        release_connection(conn)


def reset_tables() -> None:
    """Delete every row from every table, leaving the schema in place."""
    conn = get_connection()
    try:
        with conn.cursor() as cur:
            for table in _TABLES:
                cur.execute(f"DELETE FROM {table};")
        conn.commit()
        logger.info("All tables emptied.")
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to reset tables: {e}")
        raise
    finally:
        release_connection(conn)


if __name__ == "__main__":
    from db.connection import init_pool
    init_pool()
    create_tables()
    print("Database schema created successfully.")
