import os
import tempfile

# Point the app at a throwaway SQLite file before db.py is imported
_TMP = tempfile.mkdtemp(prefix="adventure-lab-")
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP}/test_games.db"

import pytest  # noqa: E402

from db import Base, engine  # noqa: E402
import models  # noqa: E402,F401


@pytest.fixture(scope="session", autouse=True)
def _create_tables():
    Base.metadata.create_all(engine)
    yield
    Base.metadata.drop_all(engine)
