"""
Jokes auth gateway — application entry point.
"""

from __future__ import annotations

import logging
import sys

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.errors import register_error_handlers
from api.jokes import router as jokes_router
from api.middleware import register_middleware
from auth.routes import router as auth_router
from config.settings import config
from database.session import init_db

logging.basicConfig(
    level=logging.DEBUG if config.debug else logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
    stream=sys.stdout,
)
for _noisy in ("sqlalchemy.engine", "aiosqlite", "asyncio"):
    logging.getLogger(_noisy).setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


def create_app(create_tables: bool = True) -> FastAPI:
    app = FastAPI(
        title="Jokes Auth Gateway",
        version="1.0.0",
        description="Register, log in, and read jokes with a signed token.",
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_middleware(app)
    register_error_handlers(app)

    # Routes
    app.include_router(auth_router, prefix="/api/auth")
    app.include_router(jokes_router, prefix="/api/jokes")

    if create_tables:
        @app.on_event("startup")
        async def on_startup():
            await init_db()
            logger.info("Application ready to accept requests (%s).", config.environment)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level="debug" if config.debug else "info",
    )
