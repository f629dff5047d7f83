"""FastAPI application entry point."""

import os
import sys
import logging
import tomllib
from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# .env must be loaded before settings are read below
load_dotenv()

# Allow `python src/api/main.py` as well as `uvicorn api.main:app`
_src_path = Path(__file__).parent.parent
sys.path.insert(0, str(_src_path))

from api.dependencies import get_db_engine
from api.routes import applicants, auth, cover_letters, email, health, jobs, profile
from api.security import UnauthorizedError, unauthorized_handler
from adapter.sql.connection import init_schema
from utils.config import get_settings
from utils.logging import setup_structured_logging

setup_structured_logging()

logger = logging.getLogger(__name__)

# Fail at import time when JWT_SECRET_KEY is missing
settings = get_settings()

with open(_src_path.parent / "pyproject.toml", "rb") as f:
    VERSION = tomllib.load(f)["project"]["version"]

SERVICE_NAME = "Job Application Assistant API"


def cors_options(origins_setting: str) -> tuple[list[str], bool]:
    """Return (allow_origins, allow_credentials) for a CORS_ORIGINS value.

    Browsers refuse credentials with a wildcard origin, so ``*`` disables them.
    """
    if origins_setting == "*":
        logger.warning(
            "CORS configured with wildcard origin ('*'). "
            "Set CORS_ORIGINS to the frontend domains in production"
        )
        return ["*"], False

    origins = [origin.strip() for origin in origins_setting.split(",") if origin.strip()]
    logger.info("CORS configured with specific origins", extra={"origins": origins})
    return origins, True


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        init_schema(get_db_engine())
    except Exception as e:
        logger.error("Failed to initialize database schema", extra={"error": str(e)}, exc_info=True)

    yield

    get_db_engine().dispose()


app = FastAPI(
    title=SERVICE_NAME,
    description="Accounts, job listings, AI cover letters and email delivery",
    version=VERSION,
    lifespan=lifespan,
)

allow_origins, allow_credentials = cors_options(settings.cors_origins)
app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(UnauthorizedError, unauthorized_handler)

app.include_router(auth.router)
app.include_router(profile.router)
app.include_router(applicants.router)
app.include_router(jobs.router)
app.include_router(cover_letters.router)
app.include_router(email.router)
app.include_router(health.router)


@app.get("/")
async def root():
    return {
        "service": SERVICE_NAME,
        "version": VERSION,
        "status": "running"
    }


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", 8000))
    # Structured request logging replaces uvicorn's access log
    uvicorn.run(app, host="0.0.0.0", port=port, access_log=False)
