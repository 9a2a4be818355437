"""
Reset the database to demo data. Run from project root:
  python -m app.scripts.seed

Clears products, keys and users, then inserts two users, one API key each and three products.
"""
import logging
import sys

from sqlalchemy.orm import Session

from app.core.database import SessionLocal
from app.core.security import generate_api_key, hash_password
from app.models import ApiKey, Product, User

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

DEMO_USERS = (
    {"name": "Alice", "email": "alice@example.com", "password": "alice123", "role": "admin"},
    {"name": "Bob", "email": "bob@example.com", "password": "bob123", "role": "user"},
)


def seed(db: Session) -> dict[str, str]:
    """Replace all rows with demo data; returns {email: api_key}."""
    db.query(Product).delete(synchronize_session=False)
    db.query(ApiKey).delete(synchronize_session=False)
    db.query(User).delete(synchronize_session=False)

    users = [
        User(
            name=u["name"],
            email=u["email"],
            password_hash=hash_password(u["password"]),
            role=u["role"],
        )
        for u in DEMO_USERS
    ]
    db.add_all(users)
    db.flush()
    alice, bob = users

    keys = {u.email: generate_api_key() for u in users}
    db.add_all([ApiKey(token=keys[u.email], user_id=u.id) for u in users])

    db.add_all(
        [
            Product(type="Electronics", name="Laptop 14 OLED", serial_number="SN-001-2024", user_id=alice.id),
            Product(type="Electronics", name="Wireless Mouse", serial_number="SN-002-2024", user_id=alice.id),
            Product(type="Furniture", name="Standing Desk", serial_number="SN-003-2024", user_id=bob.id),
        ]
    )
    db.commit()
    return keys


def main() -> int:
    db = SessionLocal()
    try:
        keys = seed(db)
    except Exception as e:
        db.rollback()
        logger.exception("Seeding failed: %s", e)
        return 1
    finally:
        db.close()

    for u in DEMO_USERS:
        print(f"{u['name']:<6} {u['email']:<18} password={u['password']:<9} role={u['role']}")
    for email, key in keys.items():
        print(f"API key for {email}: {key}")
    print('Next: POST /auth/login {"email": "alice@example.com", "password": "alice123"}')
    return 0


if __name__ == "__main__":
    sys.exit(main())
