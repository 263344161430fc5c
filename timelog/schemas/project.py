"""Project, well and configuration schemas"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from .enums import Sector, CompletionType


class ProjectImport(BaseModel):
    project_number: str = Field(..., min_length=1)


class PersonnelSelection(BaseModel):
    """Personnel currently on duty for the project"""
    engineer: Optional[str] = None
    pump_operator: Optional[str] = None
    supervisor: Optional[str] = None
    customer_rep: Optional[str] = None
    completion_type: Optional[CompletionType] = None

    class Config:
        from_attributes = True


class WellRead(BaseModel):
    well_id: str
    name: str
    api_number: Optional[str] = None
    planned_number_of_stages: Optional[int] = None
    color: str = "#000000"
    is_used: bool = True

    class Config:
        from_attributes = True


class ProjectRead(BaseModel):
    id: int
    number: str
    name: str
    basin: Optional[str] = None
    crew: Optional[str] = None
    field: Optional[str] = None
    county: Optional[str] = None
    state: Optional[str] = None
    engineer: Optional[str] = None
    pump_operator: Optional[str] = None
    supervisor: Optional[str] = None
    customer_rep: Optional[str] = None
    completion_type: Optional[str] = None
    created_at: Optional[datetime] = None
    wells: List[WellRead] = []

    class Config:
        from_attributes = True


class StageRead(BaseModel):
    number: int
    is_completed: bool


class WellDisplay(BaseModel):
    well_id: str
    color: str = "#000000"
    is_used: bool = True


class SectorDisplay(BaseModel):
    sector: Sector
    color: str = "#000000"
    is_used: bool = True


class PersonnelRoster(BaseModel):
    engineers: List[str] = []
    pump_operators: List[str] = []
    supervisors: List[str] = []
    customer_reps: List[str] = []


class ProjectConfiguration(BaseModel):
    """Display configuration and personnel roster of a project"""
    well_colors: List[WellDisplay] = []
    sector_colors: List[SectorDisplay] = []
    personnel: PersonnelRoster = PersonnelRoster()
