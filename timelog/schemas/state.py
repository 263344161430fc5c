"""Project state snapshot

Explicit schema for the whole working state of one project: identity, wells,
operations, display configuration, selected personnel and UI selection.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from .operation import OperationDetails
from .project import PersonnelSelection, ProjectConfiguration, WellRead
from .enums import OperationType, Sector

STATE_VERSION = 1


class ProjectIdentity(BaseModel):
    number: str
    name: str
    basin: Optional[str] = None
    crew: Optional[str] = None
    field: Optional[str] = None
    county: Optional[str] = None
    state: Optional[str] = None


class OperationSnapshot(OperationDetails):
    """Stored operation; end_time is kept for reference but recomputed on restore"""
    well_id: str
    type: OperationType
    sector: Sector
    start_time: datetime
    end_time: Optional[datetime] = None
    engineer: Optional[str] = None
    pump_operator: Optional[str] = None
    supervisor: Optional[str] = None
    customer_rep: Optional[str] = None

    class Config:
        from_attributes = True


class UiSelection(BaseModel):
    active_tab: str = "feed"
    selected_well_id: Optional[str] = None
    selected_sector: Optional[str] = None


class ProjectState(BaseModel):
    version: int = STATE_VERSION
    project: ProjectIdentity
    wells: List[WellRead] = []
    operations: List[OperationSnapshot] = []
    configuration: ProjectConfiguration = ProjectConfiguration()
    selected_personnel: PersonnelSelection = PersonnelSelection()
    ui: UiSelection = UiSelection()
