"""ORM Models - SQLAlchemy declarative models.

All models imported here so Base.metadata is populated before create_all or
alembic autogenerate runs.
"""

from guestlist.models.invite import Invite  # noqa: F401
