"""Shared API test harness: in-memory SQLite behind the real FastAPI app."""

import unittest
from typing import Any

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import get_db
from app.main import app
from app.models import Base


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


class ApiTestCase(unittest.TestCase):
    """Each test gets a fresh database plus an athlete and an admin account."""

    def setUp(self) -> None:
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(self.engine)
        self.SessionTesting = sessionmaker(
            autocommit=False, autoflush=False, bind=self.engine
        )

        def override_get_db():
            db = self.SessionTesting()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app)

        athlete = self.register("Athlete User", "athlete@example.com", "password123", "athlete")
        self.athlete_token = athlete["token"]
        self.athlete_id = athlete["user"]["id"]
        admin = self.register("Admin User", "admin@example.com", "admin123", "admin")
        self.admin_token = admin["token"]
        self.admin_id = admin["user"]["id"]

    def tearDown(self) -> None:
        app.dependency_overrides.clear()
        Base.metadata.drop_all(self.engine)
        self.engine.dispose()

    def register(
        self,
        name: str,
        email: str,
        password: str,
        role: str | None = None,
    ) -> dict[str, Any]:
        body = {"name": name, "email": email, "password": password}
        if role is not None:
            body["role"] = role
        resp = self.client.post("/api/auth/register", json=body)
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()

    def as_athlete(self) -> dict[str, str]:
        return bearer(self.athlete_token)

    def as_admin(self) -> dict[str, str]:
        return bearer(self.admin_token)
