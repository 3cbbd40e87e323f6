"""Root conftest — shared test configuration."""

import os

# Ensure tests never touch a developer database or wait on simulated latency
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("APPLY_DELAY_MIN_MS", "0")
os.environ.setdefault("APPLY_DELAY_MAX_MS", "0")
os.environ.setdefault("SEED_DEMO_DATA", "false")
