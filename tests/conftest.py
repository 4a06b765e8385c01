"""Test-wide setup: never touch a configured postgres database."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
