"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Generator

import pytest
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.core.shared_types import Orientation
from src.db.schema import Base
from src.pasture.coords import Coords
from src.pasture.herd import Herd

# Setup an in-memory SQLite database for testing
DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)

# A legal layout. (length, x, y, orientation)
#   2: (0,0)-(1,0)   3: (0,2)-(2,2)   3: (0,4)-(0,6)   4: (3,3)-(3,6)   5: (5,9)-(9,9)
VALID_LAYOUT: list[tuple[int, int, int, Orientation]] = [
    (2, 0, 0, Orientation.HORIZONTAL),
    (3, 0, 2, Orientation.HORIZONTAL),
    (3, 0, 4, Orientation.VERTICAL),
    (4, 3, 3, Orientation.VERTICAL),
    (5, 5, 9, Orientation.HORIZONTAL),
]


@pytest.fixture
def db_session_repo() -> Generator[Session, None, None]:
    """Connection to a test database. Tables are removed at teardown to make unit tests of repository independent of each other."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        Base.metadata.drop_all(bind=engine)
        db.close()


@pytest.fixture
def valid_herds() -> list[Herd]:
    """Five herds that make up a legal pasture."""
    return [
        Herd(Coords(x, y), length, orientation)
        for length, x, y, orientation in VALID_LAYOUT
    ]
