from typing import Optional

from dining_status.core.config import settings
from dining_status.schemas import DiningStatus


def derive_status(status_text: Optional[str], activity_level: Optional[int] = None) -> DiningStatus:
    """
    Classify a hall from its status label and activity level.

    Precedence: "closed" in the label, then a busy activity level, then
    "open" in the label. Without a label the status is always unknown.
    """
    if not status_text:
        return DiningStatus.UNKNOWN

    normalized = status_text.lower()
    if "closed" in normalized:
        return DiningStatus.CLOSED
    if activity_level is not None and activity_level >= settings.BUSY_THRESHOLD:
        return DiningStatus.BUSY
    if "open" in normalized:
        return DiningStatus.OPEN
    return DiningStatus.UNKNOWN


def is_open(status: DiningStatus) -> bool:
    return status in (DiningStatus.OPEN, DiningStatus.BUSY)
