"""Database Metadata: declarative Base for migrations and test schemas.

Invariants:
    - Request handling never goes through the ORM; queries are raw SQL
      executed by infrastructure/database.py
"""
