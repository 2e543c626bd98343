import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence

from dining_status.fetch import client as fetch_client
from dining_status.fetch import extractor
from dining_status.fetch.base import settle_all
from dining_status.halls import DINING_HALLS, DiningHallConfig
from dining_status.schemas import DiningHallStatus, DiningStatus, DiningStatusResponse
from dining_status.services.classifier import derive_status, is_open

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _failure_message(page_failed: bool, activity_failed: bool) -> Optional[str]:
    failed = []
    if page_failed:
        failed.append("page")
    if activity_failed:
        failed.append("activity")
    if not failed:
        return None
    return f"Failed to load {' & '.join(failed)} data"


def _degraded_status(hall: DiningHallConfig, started_at: datetime, error: BaseException) -> DiningHallStatus:
    return DiningHallStatus(
        id=hall.id,
        name=hall.name,
        page_url=hall.page_url,
        status=DiningStatus.UNKNOWN,
        is_open=False,
        last_updated=started_at,
        error=str(error) or "Unknown error",
    )


async def resolve_hall(hall: DiningHallConfig) -> DiningHallStatus:
    """
    Build the live status record for one hall. Never raises.

    The page and activity documents are fetched concurrently and each may
    fail on its own; the status is derived from whatever was extracted.
    """
    started_at = _now()

    try:
        page, activity = await settle_all(
            fetch_client.fetch_text(hall.page_url),
            fetch_client.fetch_text(hall.activity_url),
        )

        fields: Dict[str, Any] = {}
        if page.ok:
            signals = extractor.extract_page_signals(page.value)
            fields["status_text"] = signals.status_text
            fields["status_detail"] = signals.status_detail
        else:
            logger.warning("Page fetch failed for %s: %r", hall.id, page.error)

        if activity.ok:
            fields["activity_level"] = extractor.extract_activity_level(activity.value)
        else:
            logger.warning("Activity fetch failed for %s: %r", hall.id, activity.error)

        status = derive_status(fields.get("status_text"), fields.get("activity_level"))

        return DiningHallStatus(
            id=hall.id,
            name=hall.name,
            page_url=hall.page_url,
            status=status,
            is_open=is_open(status),
            last_updated=started_at,
            error=_failure_message(not page.ok, not activity.ok),
            **fields,
        )
    except Exception as e:
        logger.exception("Unexpected error resolving %s", hall.id)
        return _degraded_status(hall, started_at, e)


async def get_all_statuses(halls: Sequence[DiningHallConfig] = DINING_HALLS) -> DiningStatusResponse:
    """
    Resolve every hall concurrently. One record per hall, in table order.
    """
    started_at = _now()
    results = await asyncio.gather(*(resolve_hall(hall) for hall in halls), return_exceptions=True)

    statuses: List[DiningHallStatus] = []
    for hall, result in zip(halls, results):
        if isinstance(result, BaseException):
            logger.error("Resolution of %s escaped with %r", hall.id, result)
            result = _degraded_status(hall, started_at, result)
        statuses.append(result)

    degraded = sum(1 for s in statuses if s.error)
    logger.info("Resolved %d dining halls (%d degraded)", len(statuses), degraded)

    return DiningStatusResponse(halls=statuses, fetched_at=_now())


async def debug_hall(hall: DiningHallConfig) -> Dict[str, Any]:
    """Raw view of both upstream documents and what was extracted from them."""
    page, activity = await settle_all(
        fetch_client.fetch_text(hall.page_url),
        fetch_client.fetch_text(hall.activity_url),
    )

    signals = extractor.extract_page_signals(page.value) if page.ok else extractor.PageSignals()
    activity_level = extractor.extract_activity_level(activity.value) if activity.ok else None
    status = derive_status(signals.status_text, activity_level)

    return {
        "id": hall.id,
        "page": {
            "url": hall.page_url,
            "html_length": len(page.value) if page.ok else None,
            "error": None if page.ok else repr(page.error),
            "status_text": signals.status_text,
            "status_detail": signals.status_detail,
            "text_preview": extractor.visible_text_preview(page.value) if page.ok else None,
        },
        "activity": {
            "url": hall.activity_url,
            "html_length": len(activity.value) if activity.ok else None,
            "error": None if activity.ok else repr(activity.error),
            "activity_level": activity_level,
        },
        "status": status.value,
        "is_open": is_open(status),
    }
