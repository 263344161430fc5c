"""API schemas

All Pydantic request/response models.
"""

from .enums import (
    OperationType,
    Sector,
    CompletionType,
    PersonnelRole,
    PAD_SECTOR,
    PARTY_TYPES,
    MAIN_EVENTS,
)
from .operation import (
    OperationDetails,
    OperationRowCreate,
    OperationBatchCreate,
    OperationUpdate,
    OperationRead,
    OperationPreset,
)
from .project import (
    ProjectImport,
    ProjectRead,
    PersonnelSelection,
    WellRead,
    StageRead,
    WellDisplay,
    SectorDisplay,
    PersonnelRoster,
    ProjectConfiguration,
)
from .timeline import TimelineEntry, TimeGroup, FeedView, SectorView, TimeGap, WellView, TableView
from .upstream import ProjectInfo, WellInfo, CompletionDesign
from .state import ProjectState, ProjectIdentity, OperationSnapshot, UiSelection

__all__ = [
    # Vocabularies
    "OperationType",
    "Sector",
    "CompletionType",
    "PersonnelRole",
    "PAD_SECTOR",
    "PARTY_TYPES",
    "MAIN_EVENTS",

    # Operations
    "OperationDetails",
    "OperationRowCreate",
    "OperationBatchCreate",
    "OperationUpdate",
    "OperationRead",
    "OperationPreset",

    # Projects and wells
    "ProjectImport",
    "ProjectRead",
    "PersonnelSelection",
    "WellRead",
    "StageRead",
    "WellDisplay",
    "SectorDisplay",
    "PersonnelRoster",
    "ProjectConfiguration",

    # Timeline views
    "TimelineEntry",
    "TimeGroup",
    "FeedView",
    "SectorView",
    "TimeGap",
    "WellView",
    "TableView",

    # Upstream payloads
    "ProjectInfo",
    "WellInfo",
    "CompletionDesign",

    # State snapshot
    "ProjectState",
    "ProjectIdentity",
    "OperationSnapshot",
    "UiSelection",
]
