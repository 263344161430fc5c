from fastapi import HTTPException
from sqlalchemy.orm import Session

from ... import crud


def get_project_or_404(db: Session, number: str):
    project = crud.get_project_by_number(db, number)
    if not project:
        raise HTTPException(status_code=404, detail="Project not found")
    return project


def well_names(project):
    """well_id -> display name, in project well order"""
    return {well.well_id: well.name for well in project.wells}
