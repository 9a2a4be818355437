"""Unit tests for store_call: which store failures become which application errors."""

import unittest
from unittest.mock import MagicMock

from sqlalchemy.exc import IntegrityError, OperationalError

from app.core.errors import ConflictError, InternalError, NotFoundError
from app.services.store import store_call


class _PgError(Exception):
    """Stand-in for a psycopg2 error carrying its SQLSTATE."""

    def __init__(self, message: str, pgcode: str) -> None:
        super().__init__(message)
        self.pgcode = pgcode


def _integrity(orig: Exception) -> IntegrityError:
    return IntegrityError("INSERT INTO products", {}, orig)


class TestStoreCall(unittest.TestCase):
    def setUp(self) -> None:
        self.db = MagicMock()

    def _raise_inside(self, exc: Exception, **kwargs: str):
        with store_call(self.db, "Failed to create product", **kwargs):
            raise exc

    def test_sqlite_unique_violation_is_conflict(self) -> None:
        exc = _integrity(Exception("UNIQUE constraint failed: products.serial_number"))
        with self.assertRaises(ConflictError) as ctx:
            self._raise_inside(exc, conflict="Serial number already exists")
        self.assertEqual(ctx.exception.message, "Serial number already exists")
        self.db.rollback.assert_called_once()

    def test_postgres_unique_violation_is_conflict(self) -> None:
        exc = _integrity(_PgError("duplicate key value", "23505"))
        with self.assertRaises(ConflictError):
            self._raise_inside(exc, conflict="Serial number already exists")

    def test_foreign_key_violation_is_not_reported_as_conflict(self) -> None:
        exc = _integrity(Exception("FOREIGN KEY constraint failed"))
        with self.assertRaises(InternalError) as ctx:
            self._raise_inside(exc, conflict="Serial number already exists")
        self.assertEqual(ctx.exception.message, "Failed to create product")

    def test_foreign_key_violation_is_missing_parent(self) -> None:
        for orig in (
            Exception("FOREIGN KEY constraint failed"),
            _PgError("insert or update violates foreign key constraint", "23503"),
        ):
            with self.subTest(orig=str(orig)):
                with self.assertRaises(NotFoundError) as ctx:
                    self._raise_inside(
                        _integrity(orig),
                        conflict="Serial number already exists",
                        missing_parent="User not found",
                    )
                self.assertEqual(ctx.exception.message, "User not found")

    def test_other_integrity_error_is_internal(self) -> None:
        exc = _integrity(Exception("NOT NULL constraint failed: products.name"))
        with self.assertRaises(InternalError) as ctx:
            self._raise_inside(
                exc, conflict="Serial number already exists", missing_parent="User not found"
            )
        self.assertIn("NOT NULL", ctx.exception.error)

    def test_unique_violation_without_conflict_message_is_internal(self) -> None:
        exc = _integrity(Exception("UNIQUE constraint failed: keys.token"))
        with self.assertRaises(InternalError):
            self._raise_inside(exc)

    def test_operational_error_is_internal(self) -> None:
        exc = OperationalError("SELECT 1", {}, Exception("database is locked"))
        with self.assertRaises(InternalError):
            self._raise_inside(exc, conflict="Serial number already exists")
        self.db.rollback.assert_called_once()

    def test_app_errors_pass_through(self) -> None:
        with self.assertRaises(NotFoundError):
            self._raise_inside(NotFoundError("Product not found"))
        self.db.rollback.assert_not_called()


if __name__ == "__main__":
    unittest.main()
