import asyncio
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from shiftcal.config import settings
from shiftcal.core.exceptions import ShiftCalendarError
from shiftcal.database import get_db
from shiftcal.routers import birthdays, calendar, events, holidays, vacations
from shiftcal.routers import settings as settings_router

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Holiday Sync background task
# ---------------------------------------------------------------------------
async def _holiday_sync_loop() -> None:
    """Sync holidays once at startup, then yearly on Jan 1st."""
    from shiftcal.database import async_session
    from shiftcal.services.holiday_service import sync_holidays_to_db

    while True:
        try:
            async with async_session() as db:
                year = datetime.now(timezone.utc).year
                synced = await sync_holidays_to_db(db, year)
                synced_next = await sync_holidays_to_db(db, year + 1)
                await db.commit()
                logger.info(
                    "Holiday sync: %d holidays for %d, %d for %d",
                    len(synced), year, len(synced_next), year + 1,
                )
        except Exception:
            logger.exception("Holiday sync error")

        # Sleep until Jan 1st next year 00:15 UTC
        now = datetime.now(timezone.utc)
        next_jan = now.replace(
            year=now.year + 1, month=1, day=1,
            hour=0, minute=15, second=0, microsecond=0,
        )
        await asyncio.sleep((next_jan - now).total_seconds())


# ---------------------------------------------------------------------------
# Lifespan context manager
# ---------------------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan: runs on startup and shutdown."""
    logger.info("Schichtkalender API started")
    holiday_task = asyncio.create_task(_holiday_sync_loop())
    yield
    holiday_task.cancel()
    logger.info("Schichtkalender API shutting down")


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------
app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
    openapi_url="/openapi.json" if settings.DEBUG else None,
)


# -- Middleware ---------------------------------------------------------------
app.add_middleware(GZipMiddleware, minimum_size=1000)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type"],
)


# -- Domain errors ------------------------------------------------------------
@app.exception_handler(ShiftCalendarError)
async def shift_calendar_error_handler(request: Request, exc: ShiftCalendarError):
    """Report refused calendar operations with the HTTPException body shape."""
    logger.info("%s %s refused: %s", request.method, request.url.path, exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


# ---------------------------------------------------------------------------
# Health check
# ---------------------------------------------------------------------------
@app.get("/health", tags=["health"])
async def health_check(db: AsyncSession = Depends(get_db)):
    """Health check with DB connectivity verification."""
    checks: dict[str, str] = {"db": "ok"}

    try:
        await db.execute(select(1))
    except Exception:
        checks["db"] = "error"

    degraded = any(v == "error" for v in checks.values())
    return {"status": "degraded" if degraded else "ok", "app": settings.APP_NAME, **checks}


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
app.include_router(settings_router.router, prefix=settings.API_V1_PREFIX)
app.include_router(calendar.router, prefix=settings.API_V1_PREFIX)
app.include_router(events.router, prefix=settings.API_V1_PREFIX)
app.include_router(vacations.router, prefix=settings.API_V1_PREFIX)
app.include_router(birthdays.router, prefix=settings.API_V1_PREFIX)
app.include_router(holidays.router, prefix=settings.API_V1_PREFIX)
