"""Well ORM model"""

from sqlalchemy import Column, Integer, String, Boolean, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from ..database.connection import Base


class Well(Base):
    """Well table"""
    __tablename__ = "wells"
    __table_args__ = (UniqueConstraint("project_id", "well_id", name="uq_wells_project_well"),)

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False)
    well_id = Column(String(64), nullable=False, index=True)  # upstream identifier
    name = Column(String(255), nullable=False)
    api_number = Column(String(64), nullable=True)
    planned_number_of_stages = Column(Integer, nullable=True)
    # Display settings
    color = Column(String(16), nullable=False, default="#000000")
    is_used = Column(Boolean, nullable=False, default=True)

    project = relationship("Project", back_populates="wells")
