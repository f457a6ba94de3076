import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware

from app.db.postgres.base import dispose_engine, init_db
from app.errors import register_error_handlers
from app.routers import posts
from app.security import API_KEY_NAME
from app.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings.validate_required()
    init_db()
    logger.info("Blog API ready")

    try:
        yield
    finally:
        dispose_engine()
        logger.info("Database connections closed")


app = FastAPI(
    title="Void Blog API",
    description="Posts storage for the Void blog",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", API_KEY_NAME],
)
register_error_handlers(app)

app.include_router(posts.router)


@app.get("/")
async def root():
    return {"message": "Void Blog API is running"}


@app.options("/{path:path}")
async def preflight(path: str):
    # Real CORS preflights are answered by the middleware before reaching here
    return Response(status_code=200)
