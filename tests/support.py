"""Shared fixtures: the FastAPI app wired to a fresh in-memory SQLite database per test."""

import unittest

from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import create_db_engine, get_db
from app.main import app
from app.models import Base


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


class ApiTestCase(unittest.TestCase):
    """Each test gets its own schema; sessions share one connection via StaticPool."""

    raise_server_exceptions = True

    def setUp(self) -> None:
        self.engine = create_db_engine("sqlite://", poolclass=StaticPool)
        Base.metadata.create_all(self.engine)
        self.Session = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

        def override_get_db():
            db = self.Session()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app, raise_server_exceptions=self.raise_server_exceptions)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()
        self.client.close()
        self.engine.dispose()

    def register(
        self,
        name: str = "Alice",
        email: str = "alice@example.com",
        password: str = "alice123",
        **extra: object,
    ):
        return self.client.post(
            "/auth/register",
            json={"name": name, "email": email, "password": password, **extra},
        )

    def register_token(self, **kwargs: object) -> tuple[str, int]:
        """Register and return (token, user id)."""
        res = self.register(**kwargs)
        self.assertEqual(res.status_code, 201, res.text)
        body = res.json()
        return body["token"], body["user"]["id"]
