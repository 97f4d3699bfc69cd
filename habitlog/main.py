import logging

from fastapi import FastAPI, Depends
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from sqlalchemy import text

from habitlog.db.base import get_db
from habitlog.core.config import settings
from habitlog.core.logging import configure_logging
from habitlog.routers import profile as profile_router
from habitlog.routers import water as water_router
from habitlog.routers import sunlight as sunlight_router
from habitlog.routers import meditation as meditation_router
from habitlog.routers import sleep as sleep_router
from habitlog.routers import activity as activity_router
from habitlog.routers import tasks as tasks_router
from habitlog.core.errors import (
    HabitLogException,
    habitlog_exception_handler,
    validation_exception_handler,
    unhandled_exception_handler,
)

# Both versions currently expose identical behaviour.
API_VERSIONS = ("v1", "v2")

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="habitlog API",
    description=(
        "**Personal wellness tracker**\n\n"
        "Daily logs for water, sunlight, meditation, sleep, physical activity "
        "and tasks, with weekly summaries and daily targets.\n\n"
        "All error responses follow the `{code, message, details}` envelope."
    ),
    version="2.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# --- CORS ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Exception handlers (most specific first) ---
app.add_exception_handler(HabitLogException, habitlog_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)

# --- Routers ---
for _version in API_VERSIONS:
    for _module in (
        profile_router,
        water_router,
        sunlight_router,
        meditation_router,
        sleep_router,
        activity_router,
        tasks_router,
    ):
        app.include_router(_module.router, prefix=f"/api/{_version}")


@app.get("/health", tags=["health"], summary="Health check")
def health(db: Session = Depends(get_db)):
    """
    Returns `{"status": "ok", "db": "ok"}` when both the API and the database
    are reachable. Returns HTTP 503 if the DB is down.
    """
    try:
        db.execute(text("SELECT 1"))
        db_status = "ok"
    except Exception:
        logger.warning("Database health check failed", exc_info=True)
        db_status = "unreachable"

    if db_status != "ok":
        return JSONResponse(
            status_code=503,
            content={"status": "error", "db": db_status},
        )
    return {"status": "ok", "db": "ok", "env": settings.APP_ENV}
