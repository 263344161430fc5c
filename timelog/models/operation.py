"""Operation ORM model

An operation is a timestamped event logged against a well in one sector.
end_time is derived from the other operations of the project and is only
written by the end-time resolver.
"""

from sqlalchemy import Column, Integer, String, DateTime, Boolean, Text, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database.connection import Base


class Operation(Base):
    """Operation table"""
    __tablename__ = "operations"

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False, index=True)
    well_id = Column(String(64), nullable=False, index=True)  # Well.well_id within the project
    type = Column(String(32), nullable=False)
    sector = Column(String(32), nullable=False)
    start_time = Column(DateTime, nullable=False, index=True)
    end_time = Column(DateTime, nullable=True)

    stage = Column(Integer, nullable=True)
    party = Column(String(64), nullable=True)
    main_event = Column(String(128), nullable=True)
    completion_type = Column(String(64), nullable=True)
    completed = Column(Boolean, nullable=False, default=False)
    comments = Column(Text, nullable=True)

    # Personnel on duty when the operation was logged
    engineer = Column(String(255), nullable=True)
    pump_operator = Column(String(255), nullable=True)
    supervisor = Column(String(255), nullable=True)
    customer_rep = Column(String(255), nullable=True)

    created_at = Column(DateTime, server_default=func.now())

    project = relationship("Project", back_populates="operations")
