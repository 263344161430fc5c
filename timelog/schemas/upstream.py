"""Upstream API payloads

Only the fields this application reads are declared; anything else the
upstream system sends is ignored.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class _Upstream(BaseModel):
    model_config = ConfigDict(extra="ignore")


class WellRef(_Upstream):
    id: str


class Label(_Upstream):
    label: str


class ProjectInfo(_Upstream):
    padName: Optional[str] = None
    projectNumber: str
    basin: Optional[str] = None
    numberOfWells: Optional[int] = None
    wellIDs: List[WellRef] = []
    field: Optional[str] = None
    county: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    crews: List[Label] = []


class WellInfo(_Upstream):
    wellName: Optional[str] = None
    color: Optional[str] = None
    apiNumber: Optional[str] = None
    afeNumber: Optional[str] = None
    pumpingServiceCompanies: List[Label] = []
    wirelineCompanies: List[Label] = []


class CompletionDesign(_Upstream):
    designMaximumRate: Optional[float] = None
    designMaximumPressure: Optional[float] = None
    plannedNumberOfStages: Optional[int] = None
    plannedCompletedLateralLength: Optional[float] = None
