"""Test package. Points the app at an in-memory database before any app module is imported."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-jwt-secret-for-unit-tests")
os.environ.setdefault("SEED_ON_STARTUP", "false")
