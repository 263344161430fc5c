"""Operation schemas

Pydantic models for adding, editing and reading operations.
end_time is read-only: it is always derived by the end-time resolver.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from .enums import OperationType, Sector, CompletionType, PARTY_TYPES, MAIN_EVENTS
from ..utils.helpers import to_utc_naive


class _VocabularyChecks(BaseModel):
    """Party and main event must come from the fixed lists"""

    @field_validator("party", check_fields=False)
    @classmethod
    def _check_party(cls, value):
        if value is not None and value not in PARTY_TYPES:
            raise ValueError(f"unknown party: {value}")
        return value

    @field_validator("main_event", check_fields=False)
    @classmethod
    def _check_main_event(cls, value):
        if value is not None and value not in MAIN_EVENTS:
            raise ValueError(f"unknown main event: {value}")
        return value


class OperationDetails(_VocabularyChecks):
    """Descriptive attributes of an operation"""
    stage: Optional[int] = Field(default=None, ge=0)
    party: Optional[str] = None
    main_event: Optional[str] = None
    completion_type: Optional[CompletionType] = None
    completed: bool = False
    comments: Optional[str] = None


class OperationRowCreate(OperationDetails):
    """One row of an add batch"""
    well_id: str = Field(..., min_length=1)
    type: OperationType
    sector: Sector
    # Overrides the batch start time when given
    start_time: Optional[datetime] = None

    @field_validator("start_time")
    @classmethod
    def _normalize_start(cls, value):
        return to_utc_naive(value)


class OperationBatchCreate(BaseModel):
    """Several operations logged at once, sharing a start time"""
    start_time: datetime
    operations: List[OperationRowCreate] = Field(..., min_length=1)

    @field_validator("start_time")
    @classmethod
    def _normalize_start(cls, value):
        return to_utc_naive(value)


class OperationUpdate(_VocabularyChecks):
    """Edit model; only the fields that are sent are changed"""
    well_id: Optional[str] = None
    type: Optional[OperationType] = None
    sector: Optional[Sector] = None
    start_time: Optional[datetime] = None
    stage: Optional[int] = Field(default=None, ge=0)
    party: Optional[str] = None
    main_event: Optional[str] = None
    completion_type: Optional[CompletionType] = None
    completed: Optional[bool] = None
    comments: Optional[str] = None
    engineer: Optional[str] = None
    pump_operator: Optional[str] = None
    supervisor: Optional[str] = None
    customer_rep: Optional[str] = None

    @field_validator("well_id", "type", "sector", "start_time", "completed")
    @classmethod
    def _not_null(cls, value):
        if value is None:
            raise ValueError("field may not be null")
        return value

    @field_validator("start_time")
    @classmethod
    def _normalize_start(cls, value):
        return to_utc_naive(value)


class OperationRead(BaseModel):
    id: int
    project_id: int
    well_id: str
    type: str
    sector: str
    start_time: datetime
    end_time: Optional[datetime] = None
    stage: Optional[int] = None
    party: Optional[str] = None
    main_event: Optional[str] = None
    completion_type: Optional[str] = None
    completed: bool = False
    comments: Optional[str] = None
    engineer: Optional[str] = None
    pump_operator: Optional[str] = None
    supervisor: Optional[str] = None
    customer_rep: Optional[str] = None

    class Config:
        from_attributes = True


class OperationPreset(BaseModel):
    """Pre-filled values for a quick-add shortcut"""
    key: str
    well_id: Optional[str] = None
    type: OperationType
    party: Optional[str] = None
    main_event: Optional[str] = None
    sector: Optional[Sector] = None
    completion_type: Optional[CompletionType] = None
