from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class DiningStatus(str, Enum):
    OPEN = "open"
    BUSY = "busy"
    CLOSED = "closed"
    UNKNOWN = "unknown"


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DiningHallStatus(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    page_url: str
    status_text: Optional[str] = Field(None, description="Status label shown on the hall page")
    status_detail: Optional[str] = Field(None, description="Hours or other detail under the label")
    activity_level: Optional[int] = Field(None, ge=0, le=100, description="Activity meter percentage")
    status: DiningStatus = DiningStatus.UNKNOWN
    is_open: bool = False
    last_updated: datetime
    error: Optional[str] = Field(None, description="Set when a fetch failed or resolution raised")


class DiningStatusResponse(CamelModel):
    halls: List[DiningHallStatus]
    fetched_at: datetime


class DiningHallInfo(CamelModel):
    id: str
    name: str
    page_url: str
    activity_url: str


class ErrorResponse(BaseModel):
    error: str
