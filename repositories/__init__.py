"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for a specific domain entity.
Repositories build parameterized SQL, run it through `db.connection.query`,
and return domain model objects.
"""
