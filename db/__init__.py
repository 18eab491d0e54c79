"""
db/ - Database Layer
====================
PostgreSQL connection pool, the `query()` entry point for parameterized SQL,
and schema creation. This layer is the lowest in the architecture.
"""
