"""Holiday Service.

Fetches public holidays from the Nager.Date API, keeps the ones that
apply to the configured state, and caches them in the database.  Any
fetch failure degrades to "no holidays" and is never raised to callers.
"""

import logging
import time
from datetime import date

import httpx
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from shiftcal.config import settings
from shiftcal.models.holiday import Holiday

logger = logging.getLogger(__name__)

# (year, subdivision) -> monotonic time of the last failed fetch
_failed_fetches: dict[tuple[int, str], float] = {}


def _recently_failed(year: int, subdivision: str) -> bool:
    failed_at = _failed_fetches.get((year, subdivision))
    if failed_at is None:
        return False
    if time.monotonic() - failed_at >= settings.HOLIDAY_RETRY_AFTER_SECONDS:
        del _failed_fetches[(year, subdivision)]
        return False
    return True


def filter_regional_holidays(holidays: list[dict], subdivision: str) -> dict[str, str]:
    """Map date-key to local name for nationwide holidays and those of ``subdivision``."""
    result: dict[str, str] = {}
    for holiday in holidays:
        if not isinstance(holiday, dict):
            continue
        try:
            date.fromisoformat(str(holiday.get("date")))
        except ValueError:
            continue
        counties = holiday.get("counties") or []
        if holiday.get("global") or subdivision in counties:
            result[holiday["date"]] = holiday.get("localName") or holiday.get("name") or "Feiertag"
    return result


async def fetch_holidays(year: int, subdivision: str | None = None) -> dict[str, str]:
    """Fetch the public holidays of ``year`` for one state.

    Args:
        year: The year to fetch holidays for.
        subdivision: ISO 3166-2 code (default ``settings.HOLIDAY_SUBDIVISION``).

    Returns:
        Mapping of ``YYYY-MM-DD`` to the German holiday name, empty on failure.
    """
    subdivision = subdivision or settings.HOLIDAY_SUBDIVISION
    url = f"{settings.HOLIDAY_API_BASE_URL}/PublicHolidays/{year}/{settings.HOLIDAY_COUNTRY}"

    try:
        async with httpx.AsyncClient(timeout=settings.HOLIDAY_TIMEOUT_SECONDS) as client:
            response = await client.get(url)
            response.raise_for_status()
            payload = response.json()
    except (httpx.HTTPError, ValueError) as exc:
        logger.warning("Could not fetch holidays for %d: %s", year, exc)
        return {}

    if not isinstance(payload, list):
        logger.warning("Unexpected holiday payload for %d: %s", year, type(payload).__name__)
        return {}
    return filter_regional_holidays(payload, subdivision)


async def sync_holidays_to_db(
    db: AsyncSession,
    year: int,
    subdivision: str | None = None,
) -> dict[str, str]:
    """Fetch holidays and replace the cached entries for that year and state.

    An empty fetch result keeps the existing cache and is remembered, so
    reads skip the API until ``HOLIDAY_RETRY_AFTER_SECONDS`` have passed.

    Returns:
        The freshly fetched mapping (empty on failure).
    """
    subdivision = subdivision or settings.HOLIDAY_SUBDIVISION
    fetched = await fetch_holidays(year, subdivision)
    if not fetched:
        _failed_fetches[(year, subdivision)] = time.monotonic()
        return {}
    _failed_fetches.pop((year, subdivision), None)

    await db.execute(
        delete(Holiday).where(
            Holiday.subdivision == subdivision,
            Holiday.day >= date(year, 1, 1),
            Holiday.day <= date(year, 12, 31),
        )
    )
    for date_key, name in fetched.items():
        db.add(Holiday(day=date.fromisoformat(date_key), subdivision=subdivision, name=name))
    await db.flush()

    logger.info("Holiday sync: %d holidays for %s %d", len(fetched), subdivision, year)
    return fetched


async def get_holidays(
    db: AsyncSession,
    year: int,
    subdivision: str | None = None,
) -> dict[str, str]:
    """Return cached holidays for ``year``, fetching them on first use.

    After a failed fetch this returns ``{}`` without calling the API until
    the retry delay has passed.  Explicit syncs always refetch.
    """
    subdivision = subdivision or settings.HOLIDAY_SUBDIVISION
    result = await db.execute(
        select(Holiday)
        .where(
            Holiday.subdivision == subdivision,
            Holiday.day >= date(year, 1, 1),
            Holiday.day <= date(year, 12, 31),
        )
        .order_by(Holiday.day)
    )
    cached = result.scalars().all()
    if cached:
        return {h.day.isoformat(): h.name for h in cached}
    if _recently_failed(year, subdivision):
        logger.debug("Skipping holiday fetch for %s %d after a recent failure", subdivision, year)
        return {}
    return await sync_holidays_to_db(db, year, subdivision)
