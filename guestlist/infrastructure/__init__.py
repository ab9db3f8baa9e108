"""Infrastructure Layer - database access and logging setup.

Invariants:
    - Infrastructure implements core protocols; core never imports it
    - All SQLAlchemy failures leave this layer as StorageFailureError
"""
