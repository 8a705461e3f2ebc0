"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates the SQL queries for one domain entity.
Repositories receive rows from the database and return domain model objects,
and raise QueryError when a statement fails.
"""
