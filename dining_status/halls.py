"""
Static table of the dining halls whose live status is scraped.

Each hall is addressed by two upstream documents: its public page and the
activity-meter fragment keyed by ``activity_id``.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from dining_status.core.config import settings


@dataclass(frozen=True)
class DiningHallConfig:
    id: str
    name: str
    page_url: str
    activity_id: int

    @property
    def activity_url(self) -> str:
        return build_activity_url(self.activity_id)


DINING_HALLS: Tuple[DiningHallConfig, ...] = (
    DiningHallConfig(
        id="epicuria-ackerman",
        name="Epic at Ackerman",
        page_url="https://dining.ucla.edu/epicuria-at-ackerman/",
        activity_id=874,
    ),
    DiningHallConfig(
        id="bruin-cafe",
        name="Bruin Café",
        page_url="https://dining.ucla.edu/bruin-cafe/",
        activity_id=867,
    ),
    DiningHallConfig(
        id="rendezvous",
        name="Rendezvous",
        page_url="https://dining.ucla.edu/rendezvous/",
        activity_id=870,
    ),
    DiningHallConfig(
        id="hedrick-study",
        name="The Study at Hedrick",
        page_url="https://dining.ucla.edu/the-study-at-hedrick/",
        activity_id=871,
    ),
)


def build_activity_url(activity_id: int) -> str:
    """Activity endpoint for a hall: the integer key appended to the base URL."""
    return f"{settings.ACTIVITY_BASE_URL}{activity_id}"


def get_hall(hall_id: str) -> Optional[DiningHallConfig]:
    for hall in DINING_HALLS:
        if hall.id == hall_id:
            return hall
    return None
