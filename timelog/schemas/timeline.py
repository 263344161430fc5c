"""Timeline view schemas

Response models of the feed, sector, well and table presenters.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from .operation import OperationRead


class TimelineEntry(OperationRead):
    """An operation as shown on a timeline"""
    well_name: str
    duration: str  # "<h>h <m>m" or "Ongoing"
    minutes: Optional[int] = None


class TimeGroup(BaseModel):
    start_time: datetime
    operations: List[TimelineEntry]


class FeedView(BaseModel):
    groups: List[TimeGroup]


class SectorView(BaseModel):
    active_sectors: List[str]
    sector: Optional[str] = None
    operations: List[TimelineEntry]


class TimeGap(BaseModel):
    start: datetime
    end: datetime


class WellView(BaseModel):
    wells: List[str]
    well_id: Optional[str] = None
    operations: List[TimelineEntry]
    gaps: List[TimeGap]


class TableView(BaseModel):
    rows: List[TimelineEntry]
