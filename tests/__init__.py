"""Test settings: a real signing secret and an in-memory database before app modules load."""

import os

os.environ.setdefault("JWT_SECRET", "test-signing-secret-0123456789-abcdefghijklmnop")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("APP_ENV", "dev")
