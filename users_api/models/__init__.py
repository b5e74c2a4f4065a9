"""Table Models: declarative models that define the schema.

Invariants:
    - All models inherit from Base (db/base.py)
    - Imported here so Base.metadata is complete for Alembic and tests
"""

from users_api.models.user import User  # noqa: F401
