"""FastAPI application entry point."""

import os
import sys
import logging
import tomllib
from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from dotenv import load_dotenv

# Must run before importing modules that read env vars at import time
load_dotenv()

# main.py is at <root>/src/api/main.py
_src_path = Path(__file__).parent.parent
sys.path.insert(0, str(_src_path))

from api.routes import auth, health
from utils.logging import setup_structured_logging
from adapter.mongodb.connection import get_mongodb_client, DATABASE_NAME
from adapter.mongodb.indexes import ensure_all_indexes

setup_structured_logging()

logger = logging.getLogger(__name__)

# pyproject.toml is the single source of truth for the version
with open(_src_path.parent / "pyproject.toml", "rb") as f:
    VERSION = tomllib.load(f)["project"]["version"]

SERVICE_NAME = "Phone Auth API"
DEFAULT_PORT = 8088


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup checks. Any failure here aborts server start."""
    jwt_secret = os.getenv("JWT_SECRET")
    if not jwt_secret:
        raise RuntimeError("JWT_SECRET environment variable is required")
    app.state.jwt_secret = jwt_secret

    client = get_mongodb_client()
    if client is None:
        raise RuntimeError("Could not connect to MongoDB (check MONGODB_CONN_STRING)")

    if ensure_all_indexes(client[DATABASE_NAME]):
        logger.info("MongoDB indexes verified/created successfully")
    else:
        logger.warning("Failed to create some MongoDB indexes")

    yield


app = FastAPI(
    title=SERVICE_NAME,
    description="Phone number and password registration and login",
    version=VERSION,
    lifespan=lifespan,
)


@app.exception_handler(RequestValidationError)
async def invalid_input_handler(request: Request, exc: RequestValidationError):
    """Report undecodable or incomplete bodies as 400 instead of 422."""
    logger.debug("Rejected request body", extra={"path": request.url.path, "errors": exc.errors()})
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": "Invalid input"})


app.include_router(auth.router)
app.include_router(health.router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": SERVICE_NAME,
        "version": VERSION,
        "status": "running"
    }


def run():
    """Serve the app with uvicorn on HOST:PORT."""
    import uvicorn

    port = int(os.getenv("PORT", DEFAULT_PORT))
    logger.info("Server starting", extra={"port": port})
    # access log off: request outcomes are logged by the routes
    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        access_log=False
    )


if __name__ == "__main__":
    run()
