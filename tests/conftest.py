"""Root conftest - shared test configuration."""

import os

# Ensure tests never reach a real database or admin secret
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ADMIN_PASSWORD", "")
os.environ.setdefault("LOG_FORMAT", "text")
