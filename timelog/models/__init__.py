"""ORM models

All SQLAlchemy models of the application.
"""

from .project import Project, SectorSetting, PersonnelMember
from .well import Well
from .operation import Operation

__all__ = ["Project", "SectorSetting", "PersonnelMember", "Well", "Operation"]
