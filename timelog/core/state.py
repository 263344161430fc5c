"""Project state snapshots

A ProjectState captures everything about one project: identity, wells,
operations, configuration, selected personnel and UI selection.
JsonStateRepository is the load/save boundary for a snapshot file;
build_state and restore_state move snapshots in and out of the database.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

import structlog
from pydantic import ValidationError
from sqlalchemy.orm import Session

from .. import crud, models, schemas
from ..crud.project import DEFAULT_COLOR, ROSTER_ROLES
from .timeline import resolve_end_times

log = structlog.get_logger(__name__)


class JsonStateRepository:
    """Stores a single ProjectState as a JSON file"""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load(self) -> Optional[schemas.ProjectState]:
        """Return the stored snapshot, or None when missing or unreadable

        A corrupted file is logged and ignored.
        """
        if not self.path.exists():
            return None
        try:
            return schemas.ProjectState.model_validate_json(self.path.read_text(encoding="utf-8"))
        except (OSError, ValidationError, ValueError) as exc:
            log.warning("state_discarded", path=str(self.path), error=str(exc))
            return None

    def save(self, state: schemas.ProjectState) -> None:
        """Rewrite the whole file (write to a temp file, then replace)"""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=self.path.name, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(state.model_dump_json(indent=2))
            os.replace(tmp_path, self.path)
        except OSError:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise
        log.info("state_saved", path=str(self.path), project=state.project.number)

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()


def build_state(db: Session, project: models.Project, ui: Optional[schemas.UiSelection] = None) -> schemas.ProjectState:
    """Snapshot a project as stored in the database"""
    operations = sorted(crud.list_operations(db, project.id), key=lambda op: (op.start_time, op.id))
    return schemas.ProjectState(
        project=schemas.ProjectIdentity.model_validate(project, from_attributes=True),
        wells=[schemas.WellRead.model_validate(well) for well in project.wells],
        operations=[schemas.OperationSnapshot.model_validate(op) for op in operations],
        configuration=crud.get_configuration(project),
        selected_personnel=schemas.PersonnelSelection.model_validate(project),
        ui=ui or schemas.UiSelection(),
    )


def restore_state(db: Session, state: schemas.ProjectState) -> models.Project:
    """Recreate a project from a snapshot, replacing one with the same number

    End times are recomputed; stored values are never trusted.
    Raises ValueError, before anything is changed, when the snapshot lists a
    well twice or an operation names a well missing from the snapshot.
    """
    well_ids = [well.well_id for well in state.wells]
    duplicates = sorted({well_id for well_id in well_ids if well_ids.count(well_id) > 1})
    if duplicates:
        raise ValueError(f"Snapshot lists well(s) more than once: {', '.join(duplicates)}")
    well_ids = set(well_ids)
    unknown = sorted({op.well_id for op in state.operations if op.well_id not in well_ids})
    if unknown:
        raise ValueError(f"Snapshot operations reference unknown well(s): {', '.join(unknown)}")

    existing = crud.get_project_by_number(db, state.project.number)
    if existing:
        db.delete(existing)
        db.flush()

    selection = state.selected_personnel
    project = models.Project(
        **state.project.model_dump(),
        engineer=selection.engineer,
        pump_operator=selection.pump_operator,
        supervisor=selection.supervisor,
        customer_rep=selection.customer_rep,
        completion_type=selection.completion_type.value if selection.completion_type else None,
    )
    for well in state.wells:
        project.wells.append(models.Well(**well.model_dump()))

    sector_displays = {display.sector.value: display for display in state.configuration.sector_colors}
    for sector in schemas.Sector:
        display = sector_displays.get(sector.value)
        project.sector_settings.append(models.SectorSetting(
            sector=sector.value,
            color=display.color if display else DEFAULT_COLOR,
            is_used=display.is_used if display else True,
        ))
    for key, role in ROSTER_ROLES.items():
        for name in getattr(state.configuration.personnel, key):
            project.personnel.append(models.PersonnelMember(role=role, name=name))

    for snapshot in state.operations:
        data = snapshot.model_dump(exclude={"end_time"})
        for field in ("type", "sector", "completion_type"):
            if data[field] is not None:
                data[field] = getattr(data[field], "value", data[field])
        project.operations.append(models.Operation(**data))

    resolve_end_times(project.operations)
    db.add(project)
    db.commit()
    db.refresh(project)
    log.info("state_restored", project=project.number, operations=len(state.operations))
    return project
