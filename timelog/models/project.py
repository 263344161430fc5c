"""Project ORM models

A project is one pad imported from the upstream system, together with its
display configuration and personnel roster.
"""

from sqlalchemy import Column, Integer, String, DateTime, Boolean, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database.connection import Base


class Project(Base):
    """Project (pad) table"""
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)
    number = Column(String(64), unique=True, nullable=False, index=True)
    name = Column(String(255), nullable=False)  # upstream pad name
    basin = Column(String(255), nullable=True)
    crew = Column(String(255), nullable=True)
    field = Column(String(255), nullable=True)
    county = Column(String(255), nullable=True)
    state = Column(String(255), nullable=True)

    # Selected personnel, stamped onto every operation added afterwards
    engineer = Column(String(255), nullable=True)
    pump_operator = Column(String(255), nullable=True)
    supervisor = Column(String(255), nullable=True)
    customer_rep = Column(String(255), nullable=True)
    # Default completion type for new operations
    completion_type = Column(String(64), nullable=True)

    created_at = Column(DateTime, server_default=func.now())

    wells = relationship("Well", back_populates="project", cascade="all, delete-orphan", order_by="Well.id")
    sector_settings = relationship("SectorSetting", back_populates="project", cascade="all, delete-orphan", order_by="SectorSetting.id")
    personnel = relationship("PersonnelMember", back_populates="project", cascade="all, delete-orphan", order_by="PersonnelMember.id")
    operations = relationship("Operation", back_populates="project", cascade="all, delete-orphan")


class SectorSetting(Base):
    """Per-project sector display settings"""
    __tablename__ = "sector_settings"
    __table_args__ = (UniqueConstraint("project_id", "sector", name="uq_sector_settings_project_sector"),)

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False)
    sector = Column(String(32), nullable=False)
    color = Column(String(16), nullable=False, default="#000000")
    is_used = Column(Boolean, nullable=False, default=True)

    project = relationship("Project", back_populates="sector_settings")


class PersonnelMember(Base):
    """Personnel roster entry"""
    __tablename__ = "personnel_members"

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False)
    role = Column(String(32), nullable=False)  # engineer / pump_operator / supervisor / customer_rep
    name = Column(String(255), nullable=False)

    project = relationship("Project", back_populates="personnel")
