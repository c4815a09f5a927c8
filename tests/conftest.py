"""Shared fixtures: an in-memory SQLite database and seed helpers."""
from __future__ import annotations

import os
from typing import Iterator

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_DIR", "")
os.environ.setdefault("LOG_CONSOLE", "0")

import pytest  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.engine import Engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from social_insurance.core.config import LogSettings  # noqa: E402
from social_insurance.core.log import init_logging, shutdown_logging  # noqa: E402

init_logging(LogSettings(log_dir=None, console=False), queue=False)

from social_insurance.models import Base  # noqa: E402
from tests.factories import add_city_standard, add_salaries  # noqa: E402


@pytest.fixture()
def engine() -> Iterator[Engine]:
    engine = create_engine(
        "sqlite://",
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture()
def session(session_factory: sessionmaker) -> Iterator[Session]:
    """Provide an in-memory database session for each test."""

    with session_factory() as session:
        yield session


@pytest.fixture()
def foshan_roster(session: Session) -> Session:
    """The 佛山/2024 standard with two employees on file."""

    add_city_standard(session)
    add_salaries(session, "E001", "张三", "5000", "6000", "7000")
    add_salaries(session, "E002", "李四", "1000", "1000")
    return session


def pytest_sessionfinish(session, exitstatus) -> None:
    shutdown_logging()
