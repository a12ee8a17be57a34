# tests/conftest.py
import os

# must be set before the app (and its engine) is imported
os.environ["DATABASE_URL"] = "sqlite:///./test_marketplace.db"

import pytest

from marketplace.core.database import Base, engine
import marketplace.main  # noqa: F401  registers every model on Base


@pytest.fixture(autouse=True)
def fresh_tables():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
