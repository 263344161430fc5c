"""Database operations (CRUD) - operations

Every mutation runs the end-time resolver over all operations of the project
before committing, so the stored set is consistent whenever a call returns.
- add_operations stores a batch sharing one start time
- list_operations returns the project's operations in no particular order
"""

from typing import List, Optional

import structlog
from sqlalchemy.orm import Session

from .. import models, schemas
from ..core.timeline import resolve_end_times

log = structlog.get_logger(__name__)

PERSONNEL_FIELDS = ("engineer", "pump_operator", "supervisor", "customer_rep")


def _resync_end_times(db: Session, project_id: int):
    """Recompute end times over the whole project (pending changes included)"""
    db.flush()
    operations = db.query(models.Operation).filter(models.Operation.project_id == project_id).all()
    resolve_end_times(operations)
    return operations


def _project_well_ids(db: Session, project_id: int):
    rows = db.query(models.Well.well_id).filter(models.Well.project_id == project_id).all()
    return {row[0] for row in rows}


def _enum_value(value):
    return value.value if hasattr(value, "value") else value


def add_operations(db: Session, project: models.Project, batch: schemas.OperationBatchCreate) -> List[models.Operation]:
    """Add several operations at once

    Raises ValueError (and stores nothing) when a row names a well that is not
    part of the project.
    """
    known_wells = _project_well_ids(db, project.id)
    unknown = sorted({row.well_id for row in batch.operations if row.well_id not in known_wells})
    if unknown:
        raise ValueError(f"Unknown well(s) for project {project.number}: {', '.join(unknown)}")

    created = []
    for row in batch.operations:
        db_op = models.Operation(
            project_id=project.id,
            well_id=row.well_id,
            type=_enum_value(row.type),
            sector=_enum_value(row.sector),
            start_time=row.start_time or batch.start_time,
            stage=row.stage,
            party=row.party,
            main_event=row.main_event,
            completion_type=_enum_value(row.completion_type) or project.completion_type,
            completed=row.completed,
            comments=row.comments,
        )
        # personnel on duty at the time of logging
        for field in PERSONNEL_FIELDS:
            setattr(db_op, field, getattr(project, field))
        db.add(db_op)
        created.append(db_op)

    _resync_end_times(db, project.id)
    db.commit()
    for db_op in created:
        db.refresh(db_op)
    log.info("operations_added", project=project.number, count=len(created),
             start_time=batch.start_time.isoformat())
    return created


def get_operation(db: Session, project_id: int, operation_id: int):
    return (
        db.query(models.Operation)
        .filter(models.Operation.project_id == project_id, models.Operation.id == operation_id)
        .first()
    )


def list_operations(db: Session, project_id: int) -> List[models.Operation]:
    """All operations of a project; callers sort as they need"""
    return db.query(models.Operation).filter(models.Operation.project_id == project_id).all()


def update_operation(db: Session, project_id: int, operation_id: int,
                     operation_update: schemas.OperationUpdate) -> Optional[models.Operation]:
    """Edit an operation; returns None when it does not exist

    Raises ValueError when the new well is not part of the project.
    """
    db_op = get_operation(db, project_id, operation_id)
    if not db_op:
        return None

    update_data = operation_update.model_dump(exclude_unset=True)
    if "well_id" in update_data and update_data["well_id"] not in _project_well_ids(db, project_id):
        raise ValueError(f"Unknown well: {update_data['well_id']}")
    for field, value in update_data.items():
        setattr(db_op, field, _enum_value(value))

    _resync_end_times(db, project_id)
    db.commit()
    db.refresh(db_op)
    log.info("operation_updated", project_id=project_id, operation_id=operation_id,
             fields=sorted(update_data))
    return db_op


def set_completed(db: Session, project_id: int, operation_id: int, completed: bool):
    """Toggle the completed flag (an ordinary edit)"""
    return update_operation(db, project_id, operation_id, schemas.OperationUpdate(completed=completed))


def delete_operation(db: Session, project_id: int, operation_id: int) -> bool:
    """Delete an operation and re-resolve the remaining ones"""
    db_op = get_operation(db, project_id, operation_id)
    if not db_op:
        return False
    db.delete(db_op)
    _resync_end_times(db, project_id)
    db.commit()
    log.info("operation_deleted", project_id=project_id, operation_id=operation_id)
    return True


def list_stages(db: Session, project_id: int, well_id: str) -> Optional[List[schemas.StageRead]]:
    """Stages 1..planned_number_of_stages of a well

    A stage is completed when a completed PUMP operation exists for it.
    Returns None when the well is not part of the project.
    """
    well = (
        db.query(models.Well)
        .filter(models.Well.project_id == project_id, models.Well.well_id == well_id)
        .first()
    )
    if not well:
        return None
    rows = (
        db.query(models.Operation.stage)
        .filter(
            models.Operation.project_id == project_id,
            models.Operation.well_id == well_id,
            models.Operation.type == schemas.OperationType.PUMP.value,
            models.Operation.completed.is_(True),
        )
        .all()
    )
    completed_stages = {row[0] for row in rows if row[0] is not None}
    return [
        schemas.StageRead(number=number, is_completed=number in completed_stages)
        for number in range(1, (well.planned_number_of_stages or 0) + 1)
    ]
