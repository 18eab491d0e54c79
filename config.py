"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


# ── Environment ───────────────────────────────────────────
APP_ENV: str = os.getenv("APP_ENV", "development")

# ── PostgreSQL ────────────────────────────────────────────
DB_HOST: str = os.getenv("DB_HOST", "localhost")
DB_PORT: int = int(os.getenv("DB_PORT", "5432"))
DB_NAME: str = os.getenv("DB_NAME", "jobly")
DB_TEST_NAME: str = os.getenv("DB_TEST_NAME", "jobly_test")
DB_USER: str = os.getenv("DB_USER", "jobly_user")
DB_PASS: str = os.getenv("DB_PASS", "")


def get_database_url() -> str:
    """
    Build the connection URL for the current environment.

    An explicit DATABASE_URL always wins. Otherwise the URL is assembled
    from the DB_* settings, using the test database when APP_ENV=test.
    """
    explicit = os.getenv("DATABASE_URL")
    if explicit:
        return explicit
    name = DB_TEST_NAME if APP_ENV == "test" else DB_NAME
    return f"postgresql://{DB_USER}:{DB_PASS}@{DB_HOST}:{DB_PORT}/{name}"


DATABASE_URL: str = get_database_url()

# ── Connection pool ───────────────────────────────────────
DB_POOL_MIN: int = int(os.getenv("DB_POOL_MIN", "1"))
DB_POOL_MAX: int = int(os.getenv("DB_POOL_MAX", "5"))

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
