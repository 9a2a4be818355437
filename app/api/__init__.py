"""HTTP routes: /auth at the root, resources under the API prefix."""

from fastapi import APIRouter

from app.api import auth, health, keys, products, users

auth_router = APIRouter()
auth_router.include_router(auth.router, tags=["auth"])

api_router = APIRouter()
api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(products.router, prefix="/products", tags=["products"])
api_router.include_router(keys.router, prefix="/keys", tags=["keys"])
