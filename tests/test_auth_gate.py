"""Tests for the bearer-token gate: No-Token / Expired / Invalid / Valid and library faults."""

import time
import unittest
from datetime import timedelta
from unittest.mock import patch

import jwt
from fastapi.security import HTTPAuthorizationCredentials

from app.api.auth import get_current_user
from app.core.config import settings
from app.core.errors import AuthenticationError, AuthorizationError, InternalError
from app.core.security import create_access_token
from tests.support import ApiTestCase, bearer


def _credentials(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


class TestGetCurrentUser(unittest.TestCase):
    """The dependency on its own: no database, one outcome per call."""

    def test_no_credentials_is_authentication_error(self) -> None:
        with self.assertRaises(AuthenticationError):
            get_current_user(None)

    def test_lowercase_scheme_is_authentication_error(self) -> None:
        token = create_access_token(user_id=5, email="c@x.com")
        with self.assertRaises(AuthenticationError):
            get_current_user(HTTPAuthorizationCredentials(scheme="bearer", credentials=token))

    def test_valid_token_attaches_identity_and_claims(self) -> None:
        token = create_access_token(user_id=5, email="c@x.com", role="user")
        ctx = get_current_user(_credentials(token))
        self.assertEqual(ctx.user_id, 5)
        self.assertEqual(ctx.claims.email, "c@x.com")
        self.assertEqual(ctx.claims.role, "user")

    def test_expired_token_is_authentication_error(self) -> None:
        token = create_access_token(user_id=5, email="c@x.com", expires_delta=timedelta(seconds=-1))
        with self.assertRaises(AuthenticationError) as ctx:
            get_current_user(_credentials(token))
        self.assertEqual(ctx.exception.message, "Token expired")

    def test_invalid_token_is_authorization_error(self) -> None:
        with self.assertRaises(AuthorizationError):
            get_current_user(_credentials("a.b.c"))

    def test_verification_fault_is_internal_error(self) -> None:
        token = create_access_token(user_id=5, email="c@x.com")
        with patch("app.core.security.jwt.decode", side_effect=RuntimeError("boom")):
            with self.assertRaises(InternalError) as ctx:
                get_current_user(_credentials(token))
        self.assertEqual(ctx.exception.message, "Auth check failed")
        self.assertEqual(ctx.exception.error, "boom")


class TestGateOverHttp(ApiTestCase):
    """Status codes and envelopes as seen by clients of protected routes."""

    def test_no_header_is_401(self) -> None:
        res = self.client.get("/auth/me")
        self.assertEqual(res.status_code, 401)
        body = res.json()
        self.assertFalse(body["success"])
        self.assertIn("Bearer <token>", body["message"])
        self.assertEqual(res.headers.get("www-authenticate"), "Bearer")

    def test_non_bearer_scheme_is_401(self) -> None:
        res = self.client.get("/api/products", headers={"Authorization": "Basic dXNlcjpwYXNz"})
        self.assertEqual(res.status_code, 401)

    def test_lowercase_bearer_is_401(self) -> None:
        token, _ = self.register_token()
        res = self.client.get("/auth/me", headers={"Authorization": f"bearer {token}"})
        self.assertEqual(res.status_code, 401)
        self.assertIn("Bearer <token>", res.json()["message"])

    def test_fractional_exp_token_is_accepted(self) -> None:
        _, user_id = self.register_token()
        token = jwt.encode(
            {"sub": str(user_id), "email": "alice@example.com", "exp": time.time() + 3600},
            settings.JWT_SECRET.get_secret_value(),
            algorithm=settings.JWT_ALGORITHM,
        )
        res = self.client.get("/auth/me", headers=bearer(token))
        self.assertEqual(res.status_code, 200, res.text)
        self.assertEqual(res.json()["user"]["id"], user_id)

    def test_expired_and_tampered_are_distinguishable(self) -> None:
        _, user_id = self.register_token()
        expired = create_access_token(
            user_id=user_id, email="alice@example.com", expires_delta=timedelta(seconds=-1)
        )
        valid = create_access_token(user_id=user_id, email="alice@example.com")
        tampered = valid[:-6] + ("AAAAAA" if not valid.endswith("AAAAAA") else "BBBBBB")

        res_expired = self.client.get("/api/products", headers=bearer(expired))
        res_tampered = self.client.get("/api/products", headers=bearer(tampered))

        self.assertEqual(res_expired.status_code, 401)
        self.assertEqual(res_expired.json()["message"], "Token expired")
        self.assertEqual(res_tampered.status_code, 403)
        self.assertEqual(res_tampered.json()["message"], "Invalid token")

    def test_verification_fault_is_500_with_error_detail(self) -> None:
        token, _ = self.register_token()
        with patch("app.core.security.jwt.decode", side_effect=RuntimeError("boom")):
            res = self.client.get("/auth/me", headers=bearer(token))
        self.assertEqual(res.status_code, 500)
        self.assertEqual(res.json(), {"success": False, "message": "Auth check failed", "error": "boom"})

    def test_valid_token_reaches_handler(self) -> None:
        token, _ = self.register_token()
        res = self.client.get("/api/products", headers=bearer(token))
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json(), {"success": True, "data": []})

    def test_public_routes_need_no_token(self) -> None:
        self.assertEqual(self.client.get("/").status_code, 200)
        self.assertEqual(self.client.get("/api/health").status_code, 200)


if __name__ == "__main__":
    unittest.main()
