"""Database operations (CRUD) - projects

- import_project builds a project, its wells and default display settings
  from the upstream API, replacing any project with the same number
- configuration covers well/sector display settings and the personnel roster
"""

from typing import Dict, List

import structlog
from sqlalchemy.orm import Session

from .. import models, schemas
from ..config import settings
from ..services.upstream import UpstreamClient

log = structlog.get_logger(__name__)

DEFAULT_COLOR = "#000000"

# Used when the upstream pad lists no wells
MOCK_WELLS = (
    ("well-1", "Well Alpha-1"),
    ("well-2", "Well Alpha-2"),
    ("well-3", "Well Beta-1"),
)

# roster attribute -> role
ROSTER_ROLES = {
    "engineers": schemas.PersonnelRole.ENGINEER.value,
    "pump_operators": schemas.PersonnelRole.PUMP_OPERATOR.value,
    "supervisors": schemas.PersonnelRole.SUPERVISOR.value,
    "customer_reps": schemas.PersonnelRole.CUSTOMER_REP.value,
}


def get_project_by_number(db: Session, number: str):
    return db.query(models.Project).filter(models.Project.number == number).first()


def list_projects(db: Session):
    """All projects, newest first"""
    return db.query(models.Project).order_by(models.Project.created_at.desc(), models.Project.id.desc()).all()


def get_well(db: Session, project_id: int, well_id: str):
    return (
        db.query(models.Well)
        .filter(models.Well.project_id == project_id, models.Well.well_id == well_id)
        .first()
    )


def delete_project(db: Session, number: str) -> bool:
    project = get_project_by_number(db, number)
    if not project:
        return False
    db.delete(project)
    db.commit()
    return True


def _fetch_wells(client: UpstreamClient, info: schemas.ProjectInfo) -> List[dict]:
    if not info.wellIDs:
        log.info("import_mock_wells", project=info.projectNumber)
        return [
            {"well_id": well_id, "name": name, "api_number": None,
             "planned_number_of_stages": settings.DEFAULT_PLANNED_STAGES}
            for well_id, name in MOCK_WELLS
        ]

    wells = []
    for ref in info.wellIDs:
        # each lookup falls back on its own, so one bad well never blocks the others
        well_info = client.get_well_info(ref.id)
        design = client.get_completion_design(ref.id)
        wells.append({
            "well_id": ref.id,
            "name": well_info.wellName or f"Well {ref.id}",
            "api_number": well_info.apiNumber,
            "planned_number_of_stages": design.plannedNumberOfStages or settings.DEFAULT_PLANNED_STAGES,
        })
    return wells


def import_project(db: Session, client: UpstreamClient, project_number: str) -> models.Project:
    """Create (or recreate) a project from the upstream API

    The new project has fresh wells, default display settings, an empty roster
    and no operations.
    """
    info = client.get_project_by_number(project_number)
    wells = _fetch_wells(client, info)

    existing = get_project_by_number(db, project_number)
    if existing:
        db.delete(existing)
        db.flush()
        log.info("project_replaced", project=project_number)

    project = models.Project(
        number=project_number,
        name=info.padName or f"Project {project_number}",
        basin=info.basin,
        crew=info.crews[0].label if info.crews else None,
        field=info.field,
        county=info.county,
        state=info.state,
    )
    for well in wells:
        project.wells.append(models.Well(color=DEFAULT_COLOR, is_used=True, **well))
    for sector in schemas.Sector:
        project.sector_settings.append(models.SectorSetting(sector=sector.value, color=DEFAULT_COLOR, is_used=True))
    db.add(project)
    db.commit()
    db.refresh(project)
    log.info("project_imported", project=project_number, wells=len(wells))
    return project


def get_configuration(project: models.Project) -> schemas.ProjectConfiguration:
    roster: Dict[str, List[str]] = {key: [] for key in ROSTER_ROLES}
    role_to_key = {role: key for key, role in ROSTER_ROLES.items()}
    for member in project.personnel:
        roster[role_to_key[member.role]].append(member.name)
    return schemas.ProjectConfiguration(
        well_colors=[
            schemas.WellDisplay(well_id=well.well_id, color=well.color, is_used=well.is_used)
            for well in project.wells
        ],
        sector_colors=[
            schemas.SectorDisplay(sector=setting.sector, color=setting.color, is_used=setting.is_used)
            for setting in project.sector_settings
        ],
        personnel=schemas.PersonnelRoster(**roster),
    )


def update_configuration(db: Session, project: models.Project,
                         configuration: schemas.ProjectConfiguration) -> schemas.ProjectConfiguration:
    """Replace well/sector display settings and the personnel roster

    Raises ValueError for a well that is not part of the project.
    """
    wells = {well.well_id: well for well in project.wells}
    for display in configuration.well_colors:
        well = wells.get(display.well_id)
        if well is None:
            raise ValueError(f"Unknown well: {display.well_id}")
        well.color = display.color
        well.is_used = display.is_used

    sectors = {setting.sector: setting for setting in project.sector_settings}
    for display in configuration.sector_colors:
        setting = sectors.get(display.sector.value)
        if setting is None:
            setting = models.SectorSetting(sector=display.sector.value)
            project.sector_settings.append(setting)
        setting.color = display.color
        setting.is_used = display.is_used

    project.personnel.clear()
    for key, role in ROSTER_ROLES.items():
        for name in getattr(configuration.personnel, key):
            if name.strip():
                project.personnel.append(models.PersonnelMember(role=role, name=name.strip()))

    db.commit()
    db.refresh(project)
    log.info("configuration_updated", project=project.number)
    return get_configuration(project)


def update_personnel(db: Session, project: models.Project,
                     selection: schemas.PersonnelSelection) -> models.Project:
    """Select the personnel on duty and the default completion type

    A name must come from the roster whenever the roster for that role is not
    empty; raises ValueError otherwise.
    """
    roster = get_configuration(project).personnel
    for key, role in ROSTER_ROLES.items():
        name = getattr(selection, role)
        names = getattr(roster, key)
        if name and names and name not in names:
            raise ValueError(f"{name} is not in the {role.replace('_', ' ')} roster")

    for role in ROSTER_ROLES.values():
        setattr(project, role, getattr(selection, role) or None)
    project.completion_type = selection.completion_type.value if selection.completion_type else None
    db.commit()
    db.refresh(project)
    log.info("personnel_selected", project=project.number)
    return project


def used_wells(project: models.Project) -> List[models.Well]:
    return [well for well in project.wells if well.is_used]


def used_sectors(project: models.Project) -> set:
    return {setting.sector for setting in project.sector_settings if setting.is_used}
