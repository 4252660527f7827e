"""
E-MOT - test configuration and fixtures
"""
import os
from typing import Generator

import pytest

# must be set before the app modules read their config
os.environ['DATABASE_URL'] = 'sqlite://'
os.environ['BCRYPT_ROUNDS'] = '4'
os.environ['JWT_SECRET_KEY'] = 'test-jwt-secret-key-for-testing'

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from core.security import create_access_token
from crud import incoming_mail as mail_crud
from database.base import Base
from database.session import get_db
from service import admin_auth
from helpers import mail_data


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Fresh in-memory database per test."""
    engine = create_engine(
        'sqlite://',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    session = sessionmaker(bind=engine, autocommit=False, autoflush=False)()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(engine)
        engine.dispose()


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, None, None]:
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    # no context manager: the startup seeding would hit the module-level engine
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin(db_session: Session):
    return admin_auth.register_admin(db_session, 'operator', 'secret123')


@pytest.fixture
def auth_headers(admin) -> dict:
    return {'Authorization': f'Bearer {create_access_token(admin.id)}'}


@pytest.fixture
def make_mail(db_session: Session):
    counter = {'n': 0}

    def _make(**overrides):
        counter['n'] += 1
        overrides.setdefault('registration_number', f'REG-2024-{counter["n"]:03d}')
        return mail_crud.create(db_session, mail_data(**overrides))

    return _make

