from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ... import crud, schemas
from ...core.state import build_state, restore_state
from ...database.connection import get_db
from ...services.upstream import UpstreamClient, get_upstream_client
from .deps import get_project_or_404

router = APIRouter()


@router.post("/import", response_model=schemas.ProjectRead, status_code=201)
def import_project_endpoint(
    payload: schemas.ProjectImport,
    db: Session = Depends(get_db),
    client: UpstreamClient = Depends(get_upstream_client),
):
    """Import (or re-import) a project from the upstream API"""
    number = payload.project_number.strip()
    if not number:
        raise HTTPException(status_code=400, detail="Project number is required")
    return crud.import_project(db, client, number)


@router.get("/", response_model=List[schemas.ProjectRead])
def list_projects_endpoint(db: Session = Depends(get_db)):
    return crud.list_projects(db)


@router.get("/{number}", response_model=schemas.ProjectRead)
def get_project_endpoint(number: str, db: Session = Depends(get_db)):
    return get_project_or_404(db, number)


@router.delete("/{number}")
def delete_project_endpoint(number: str, db: Session = Depends(get_db)):
    if not crud.delete_project(db, number):
        raise HTTPException(status_code=404, detail="Project not found")
    return {"message": "Project deleted successfully"}


@router.get("/{number}/configuration", response_model=schemas.ProjectConfiguration)
def get_configuration_endpoint(number: str, db: Session = Depends(get_db)):
    return crud.get_configuration(get_project_or_404(db, number))


@router.put("/{number}/configuration", response_model=schemas.ProjectConfiguration)
def update_configuration_endpoint(number: str, configuration: schemas.ProjectConfiguration,
                                  db: Session = Depends(get_db)):
    project = get_project_or_404(db, number)
    try:
        return crud.update_configuration(db, project, configuration)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.put("/{number}/personnel", response_model=schemas.ProjectRead)
def update_personnel_endpoint(number: str, selection: schemas.PersonnelSelection,
                              db: Session = Depends(get_db)):
    """Select personnel on duty and the default completion type"""
    project = get_project_or_404(db, number)
    try:
        return crud.update_personnel(db, project, selection)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/{number}/wells", response_model=List[schemas.WellRead])
def list_wells_endpoint(number: str, db: Session = Depends(get_db)):
    return get_project_or_404(db, number).wells


@router.get("/{number}/wells/{well_id}/stages", response_model=List[schemas.StageRead])
def list_stages_endpoint(number: str, well_id: str, db: Session = Depends(get_db)):
    """Planned stages of a well with their completion status"""
    project = get_project_or_404(db, number)
    stages = crud.list_stages(db, project.id, well_id)
    if stages is None:
        raise HTTPException(status_code=404, detail="Well not found")
    return stages


@router.get("/{number}/state", response_model=schemas.ProjectState)
def export_state_endpoint(number: str, db: Session = Depends(get_db)):
    return build_state(db, get_project_or_404(db, number))


@router.post("/state", response_model=schemas.ProjectRead, status_code=201)
def restore_state_endpoint(state: schemas.ProjectState, db: Session = Depends(get_db)):
    """Restore a project snapshot; end times are recomputed"""
    try:
        return restore_state(db, state)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
