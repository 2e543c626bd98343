import logging

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import JSONResponse

from dining_status.halls import DINING_HALLS, get_hall
from dining_status.schemas import DiningHallInfo, DiningHallStatus, DiningStatusResponse, ErrorResponse
from dining_status.services import dining

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/dining")


@router.get(
    "/status",
    response_model=DiningStatusResponse,
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}},
)
async def dining_status():
    """
    Live status of every configured dining hall.

    Individual upstream failures degrade only the affected hall; a failure
    outside any hall returns a single error and no partial data.
    """
    try:
        return await dining.get_all_statuses()
    except Exception as e:
        logger.exception("Failed to load dining status")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error=str(e) or "Failed to load dining status").model_dump(),
        )


@router.get("/status/{hall_id}", response_model=DiningHallStatus, response_model_exclude_none=True)
async def dining_hall_status(hall_id: str):
    """Live status of a single dining hall"""
    hall = get_hall(hall_id)
    if hall is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown dining hall: {hall_id}"
        )
    return await dining.resolve_hall(hall)


@router.get("/halls", response_model=list[DiningHallInfo])
async def list_halls():
    """Configured dining halls and their upstream endpoints"""
    return [
        DiningHallInfo(
            id=hall.id,
            name=hall.name,
            page_url=hall.page_url,
            activity_url=hall.activity_url,
        )
        for hall in DINING_HALLS
    ]


@router.post("/debug/{hall_id}")
async def debug_scrape(hall_id: str):
    """Debug endpoint to see what is fetched and extracted for a hall"""
    hall = get_hall(hall_id)
    if hall is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown dining hall: {hall_id}"
        )
    try:
        return await dining.debug_hall(hall)
    except Exception as e:
        logger.exception("Debug scrape failed for %s", hall_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Debug scrape failed: {str(e)}"
        )
