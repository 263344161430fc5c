from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from ... import crud, schemas
from ...core.quick_add import PRESETS, build_preset, list_presets
from ...database.connection import get_db
from .deps import get_project_or_404

router = APIRouter()


@router.post("/{number}/operations", response_model=List[schemas.OperationRead], status_code=201)
def add_operations_endpoint(number: str, batch: schemas.OperationBatchCreate, db: Session = Depends(get_db)):
    """Add one or more operations sharing a start time"""
    project = get_project_or_404(db, number)
    try:
        return crud.add_operations(db, project, batch)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/{number}/operations", response_model=List[schemas.OperationRead])
def list_operations_endpoint(number: str, db: Session = Depends(get_db)):
    project = get_project_or_404(db, number)
    return crud.list_operations(db, project.id)


@router.get("/{number}/operations/{operation_id}", response_model=schemas.OperationRead)
def get_operation_endpoint(number: str, operation_id: int, db: Session = Depends(get_db)):
    project = get_project_or_404(db, number)
    db_op = crud.get_operation(db, project.id, operation_id)
    if not db_op:
        raise HTTPException(status_code=404, detail="Operation not found")
    return db_op


@router.put("/{number}/operations/{operation_id}", response_model=schemas.OperationRead)
def update_operation_endpoint(number: str, operation_id: int, operation_update: schemas.OperationUpdate,
                              db: Session = Depends(get_db)):
    project = get_project_or_404(db, number)
    try:
        db_op = crud.update_operation(db, project.id, operation_id, operation_update)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not db_op:
        raise HTTPException(status_code=404, detail="Operation not found")
    return db_op


@router.delete("/{number}/operations/{operation_id}")
def delete_operation_endpoint(number: str, operation_id: int, db: Session = Depends(get_db)):
    project = get_project_or_404(db, number)
    if not crud.delete_operation(db, project.id, operation_id):
        raise HTTPException(status_code=404, detail="Operation not found")
    return {"message": "Operation deleted successfully"}


@router.get("/{number}/presets", response_model=List[schemas.OperationPreset])
def list_presets_endpoint(number: str, well_id: Optional[str] = Query(None, description="selected well"),
                          db: Session = Depends(get_db)):
    project = get_project_or_404(db, number)
    operations = crud.list_operations(db, project.id)
    return list_presets(operations, project.wells, well_id, project.completion_type)


@router.get("/{number}/presets/{key}", response_model=schemas.OperationPreset)
def get_preset_endpoint(number: str, key: str, well_id: Optional[str] = Query(None, description="selected well"),
                        db: Session = Depends(get_db)):
    project = get_project_or_404(db, number)
    if key not in PRESETS:
        raise HTTPException(status_code=404, detail="Preset not found")
    operations = crud.list_operations(db, project.id)
    return build_preset(key, operations, project.wells, well_id, project.completion_type)
