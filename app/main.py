"""FastAPI application entrypoint. No business logic; only wiring, middleware and error handlers."""

from dotenv import load_dotenv

load_dotenv()

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app import __version__
from app.api import api_router, auth_router
from app.core.config import settings
from app.core.errors import register_exception_handlers

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Inventory API",
    version=__version__,
    docs_url=f"{settings.API_PREFIX}/docs",
    redoc_url=f"{settings.API_PREFIX}/redoc",
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.APP_ENV == "dev" else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(auth_router, prefix="/auth")
app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/")
def root() -> dict[str, object]:
    """Discovery payload: where the docs are and how to get a token."""
    return {
        "status": "ok",
        "message": "Inventory API is running",
        "docs": f"{settings.API_PREFIX}/docs",
        "flow": [
            "1. POST /auth/register  - create an account (returns a JWT)",
            "2. POST /auth/login     - or log in (returns a JWT)",
            "3. GET  /auth/me        - check your profile (token required)",
            f"4. Send 'Authorization: Bearer <token>' to {settings.API_PREFIX}/users, "
            f"{settings.API_PREFIX}/products, {settings.API_PREFIX}/keys",
        ],
    }


def run() -> None:
    """Serve the app with uvicorn on HOST:PORT."""
    import uvicorn

    logger.info("Starting Inventory API on %s:%s", settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
