"""Root conftest — shared test configuration."""

import os

# Ensure tests never talk to a real database or a real application
os.environ.setdefault("DISCORD_PUBLIC_KEY", "0" * 64)
os.environ.setdefault("DISCORD_APPLICATION_ID", "1000")
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
