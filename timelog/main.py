"""FastAPI application entry point

JSON API under /api/v1 plus a small server-rendered UI under /ui.
- database sessions come from the get_db dependency
- the UI keeps its selection (project, tab, sector, well) in the session cookie
"""

from datetime import datetime
from pathlib import Path
from typing import List, Optional

import structlog
from fastapi import FastAPI, Request, Form, Depends, HTTPException
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError
from sqlalchemy import text
from sqlalchemy.orm import Session
from starlette.middleware.sessions import SessionMiddleware

from .api.v1 import projects_router, operations_router, timelines_router, upstream_router
from .api.v1.deps import well_names
from . import crud, schemas
from .core import presenters
from .core.quick_add import PRESETS, build_preset
from .config.settings import settings
from .database.connection import Base, engine, get_db
from .logging import RequestIdMiddleware, setup_logging
from .services.upstream import UpstreamClient, get_upstream_client
from .utils.helpers import format_datetime, to_utc_naive

setup_logging()
log = structlog.get_logger(__name__)

Base.metadata.create_all(bind=engine)

app = FastAPI(title=settings.APP_TITLE, description=settings.APP_DESCRIPTION, version=settings.APP_VERSION)

app.add_middleware(
    SessionMiddleware,
    secret_key=settings.SECRET_KEY,
    session_cookie="timelog_session",
    max_age=settings.SESSION_MAX_AGE,
)
app.add_middleware(RequestIdMiddleware)

# API routers
app.include_router(projects_router, prefix="/api/v1/projects", tags=["projects"])
app.include_router(operations_router, prefix="/api/v1/projects", tags=["operations"])
app.include_router(timelines_router, prefix="/api/v1/projects", tags=["timelines"])
app.include_router(upstream_router, prefix="/api/v1/upstream", tags=["upstream"])

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent / "templates"))
templates.env.filters["dt"] = format_datetime

TABS = ("feed", "sectors", "wells", "table")


def _parse_form_datetime(value: str) -> datetime:
    """datetime-local inputs send "YYYY-MM-DDTHH:MM" """
    return to_utc_naive(datetime.fromisoformat(value.strip()))


def _blank(value: Optional[str]) -> Optional[str]:
    return value if value not in (None, "") else None


def _timeline_context(request: Request, db: Session, project, error: Optional[str] = None,
                      preset: Optional[schemas.OperationPreset] = None):
    selection = request.session
    tab = selection.get("active_tab", "feed")
    operations = crud.list_operations(db, project.id)
    names = well_names(project)
    context = {
        "project": project,
        "tab": tab,
        "tabs": TABS,
        "error": error,
        "wells": project.wells,
        "used_wells": crud.used_wells(project),
        "configuration": crud.get_configuration(project),
        "operation_types": list(schemas.OperationType),
        "sectors": list(schemas.Sector),
        "completion_types": list(schemas.CompletionType),
        "parties": schemas.PARTY_TYPES,
        "main_events": schemas.MAIN_EVENTS,
        "presets": list(PRESETS),
        "preset": preset,
        "now": datetime.utcnow().strftime("%Y-%m-%dT%H:%M"),
    }
    if tab == "sectors":
        context["view"] = presenters.sector_view(
            operations, names, selection.get("selected_sector"), crud.used_sectors(project))
    elif tab == "wells":
        context["view"] = presenters.well_view(operations, names, selection.get("selected_well_id"))
    elif tab == "table":
        context["view"] = presenters.table(operations, names)
    else:
        context["view"] = presenters.feed(operations, names)
    return context


# UI routes
@app.get("/ui", response_class=HTMLResponse)
def setup_page(request: Request, db: Session = Depends(get_db)):
    """Project setup form and list of imported projects"""
    current = request.session.get("project_number")
    if current and crud.get_project_by_number(db, current):
        return RedirectResponse(url=f"/ui/projects/{current}", status_code=303)
    return templates.TemplateResponse(
        request, "setup.html", {"projects": crud.list_projects(db), "error": None}
    )


@app.post("/ui/setup", response_class=HTMLResponse)
def setup_project(
    request: Request,
    project_number: str = Form(""),
    db: Session = Depends(get_db),
    client: UpstreamClient = Depends(get_upstream_client),
):
    """Import a project and open its timeline"""
    number = project_number.strip()
    if not number:
        return templates.TemplateResponse(
            request, "setup.html",
            {"projects": crud.list_projects(db), "error": "Project number is required"},
            status_code=400,
        )
    project = crud.import_project(db, client, number)
    request.session.clear()
    request.session["project_number"] = project.number
    return RedirectResponse(url=f"/ui/projects/{project.number}", status_code=303)


@app.get("/ui/reset")
def reset_selection(request: Request):
    """Forget the current project selection and go back to setup"""
    request.session.clear()
    return RedirectResponse(url="/ui", status_code=303)


@app.get("/ui/projects/{number}", response_class=HTMLResponse)
def timeline_page(
    request: Request,
    number: str,
    tab: Optional[str] = None,
    sector: Optional[str] = None,
    well_id: Optional[str] = None,
    preset: Optional[str] = None,
    db: Session = Depends(get_db),
):
    """Timeline page; query parameters update the remembered selection"""
    project = crud.get_project_by_number(db, number)
    if not project:
        return RedirectResponse(url="/ui", status_code=303)

    request.session["project_number"] = project.number
    if tab in TABS:
        request.session["active_tab"] = tab
    if sector:
        request.session["selected_sector"] = sector
    if well_id:
        request.session["selected_well_id"] = well_id

    preset_values = None
    if preset in PRESETS:
        preset_values = build_preset(
            preset, crud.list_operations(db, project.id), project.wells,
            request.session.get("selected_well_id"), project.completion_type,
        )
    return templates.TemplateResponse(
        request, "timeline.html", _timeline_context(request, db, project, preset=preset_values)
    )


@app.post("/ui/projects/{number}/operations", response_class=HTMLResponse)
def add_operations_ui(
    request: Request,
    number: str,
    start_time: str = Form(...),
    well_ids: List[str] = Form([]),
    type: str = Form(...),
    sector: str = Form(...),
    stage: Optional[str] = Form(None),
    party: Optional[str] = Form(None),
    main_event: Optional[str] = Form(None),
    completion_type: Optional[str] = Form(None),
    comments: Optional[str] = Form(None),
    db: Session = Depends(get_db),
):
    """Add one operation per selected well, all sharing the start time"""
    project = crud.get_project_by_number(db, number)
    if not project:
        return RedirectResponse(url="/ui", status_code=303)

    try:
        batch = schemas.OperationBatchCreate(
            start_time=_parse_form_datetime(start_time),
            operations=[
                schemas.OperationRowCreate(
                    well_id=well_id,
                    type=type,
                    sector=sector,
                    stage=int(stage) if _blank(stage) else None,
                    party=_blank(party),
                    main_event=_blank(main_event),
                    completion_type=_blank(completion_type),
                    comments=_blank(comments),
                )
                for well_id in well_ids
            ],
        )
        crud.add_operations(db, project, batch)
    except ValidationError as e:
        messages = "; ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors())
        return templates.TemplateResponse(
            request, "timeline.html",
            _timeline_context(request, db, project, error=f"Invalid operation: {messages}"),
            status_code=400,
        )
    except ValueError as e:
        return templates.TemplateResponse(
            request, "timeline.html", _timeline_context(request, db, project, error=str(e)), status_code=400
        )
    return RedirectResponse(url=f"/ui/projects/{project.number}", status_code=303)


@app.post("/ui/projects/{number}/operations/{operation_id}/toggle")
def toggle_operation_ui(request: Request, number: str, operation_id: int, db: Session = Depends(get_db)):
    """Flip the completed flag"""
    project = crud.get_project_by_number(db, number)
    if not project:
        return RedirectResponse(url="/ui", status_code=303)
    db_op = crud.get_operation(db, project.id, operation_id)
    if not db_op:
        raise HTTPException(status_code=404, detail="Operation not found")
    crud.set_completed(db, project.id, operation_id, not db_op.completed)
    return RedirectResponse(url=f"/ui/projects/{project.number}", status_code=303)


@app.post("/ui/projects/{number}/operations/{operation_id}/delete")
def delete_operation_ui(request: Request, number: str, operation_id: int, db: Session = Depends(get_db)):
    project = crud.get_project_by_number(db, number)
    if not project:
        return RedirectResponse(url="/ui", status_code=303)
    if not crud.delete_operation(db, project.id, operation_id):
        raise HTTPException(status_code=404, detail="Operation not found")
    return RedirectResponse(url=f"/ui/projects/{project.number}", status_code=303)


def _edit_context(project, db_op, error: Optional[str] = None):
    return {
        "project": project,
        "operation": db_op,
        "error": error,
        "wells": project.wells,
        "operation_types": list(schemas.OperationType),
        "sectors": list(schemas.Sector),
        "completion_types": list(schemas.CompletionType),
        "parties": schemas.PARTY_TYPES,
        "main_events": schemas.MAIN_EVENTS,
    }


@app.get("/ui/projects/{number}/operations/{operation_id}/edit", response_class=HTMLResponse)
def edit_operation_form(request: Request, number: str, operation_id: int, db: Session = Depends(get_db)):
    """Edit form for one operation"""
    project = crud.get_project_by_number(db, number)
    if not project:
        return RedirectResponse(url="/ui", status_code=303)
    db_op = crud.get_operation(db, project.id, operation_id)
    if not db_op:
        raise HTTPException(status_code=404, detail="Operation not found")
    return templates.TemplateResponse(request, "operation_edit.html", _edit_context(project, db_op))


@app.post("/ui/projects/{number}/operations/{operation_id}/edit", response_class=HTMLResponse)
def edit_operation_ui(
    request: Request,
    number: str,
    operation_id: int,
    start_time: str = Form(...),
    well_id: str = Form(...),
    type: str = Form(...),
    sector: str = Form(...),
    stage: Optional[str] = Form(None),
    party: Optional[str] = Form(None),
    main_event: Optional[str] = Form(None),
    completion_type: Optional[str] = Form(None),
    completed: Optional[str] = Form(None),
    comments: Optional[str] = Form(None),
    db: Session = Depends(get_db),
):
    """Save an edited operation; every field, start time and sector included"""
    project = crud.get_project_by_number(db, number)
    if not project:
        return RedirectResponse(url="/ui", status_code=303)
    db_op = crud.get_operation(db, project.id, operation_id)
    if not db_op:
        raise HTTPException(status_code=404, detail="Operation not found")

    try:
        operation_update = schemas.OperationUpdate(
            start_time=_parse_form_datetime(start_time),
            well_id=well_id,
            type=type,
            sector=sector,
            stage=int(stage) if _blank(stage) else None,
            party=_blank(party),
            main_event=_blank(main_event),
            completion_type=_blank(completion_type),
            completed=completed is not None,
            comments=_blank(comments),
        )
        crud.update_operation(db, project.id, operation_id, operation_update)
    except ValueError as e:
        # pydantic's ValidationError is a ValueError too
        db.rollback()
        return templates.TemplateResponse(
            request, "operation_edit.html",
            _edit_context(project, crud.get_operation(db, project.id, operation_id), error=str(e)),
            status_code=400,
        )
    return RedirectResponse(url=f"/ui/projects/{project.number}", status_code=303)


@app.get("/ui/projects/{number}/configure", response_class=HTMLResponse)
def configure_project_form(request: Request, number: str, db: Session = Depends(get_db)):
    """Well/sector display settings and personnel roster"""
    project = crud.get_project_by_number(db, number)
    if not project:
        return RedirectResponse(url="/ui", status_code=303)
    return templates.TemplateResponse(
        request, "configure.html",
        {"project": project, "configuration": crud.get_configuration(project), "error": None},
    )


@app.post("/ui/projects/{number}/configure", response_class=HTMLResponse)
async def configure_project_ui(request: Request, number: str, db: Session = Depends(get_db)):
    """Save the configuration form

    Fields: well_color_<well_id>, well_used_<well_id>, sector_color_<sector>,
    sector_used_<sector> and one roster textarea per role (one name per line).
    """
    project = crud.get_project_by_number(db, number)
    if not project:
        return RedirectResponse(url="/ui", status_code=303)

    form_data = await request.form()
    try:
        configuration = schemas.ProjectConfiguration(
            well_colors=[
                schemas.WellDisplay(
                    well_id=well.well_id,
                    color=form_data.get(f"well_color_{well.well_id}") or well.color,
                    is_used=f"well_used_{well.well_id}" in form_data,
                )
                for well in project.wells
            ],
            sector_colors=[
                schemas.SectorDisplay(
                    sector=sector,
                    color=form_data.get(f"sector_color_{sector.value}") or "#000000",
                    is_used=f"sector_used_{sector.value}" in form_data,
                )
                for sector in schemas.Sector
            ],
            personnel=schemas.PersonnelRoster(**{
                key: [line.strip() for line in (form_data.get(key) or "").splitlines() if line.strip()]
                for key in ("engineers", "pump_operators", "supervisors", "customer_reps")
            }),
        )
        crud.update_configuration(db, project, configuration)
    except ValueError as e:
        db.rollback()
        return templates.TemplateResponse(
            request, "configure.html",
            {"project": project, "configuration": crud.get_configuration(project), "error": str(e)},
            status_code=400,
        )
    return RedirectResponse(url=f"/ui/projects/{project.number}", status_code=303)


@app.post("/ui/projects/{number}/personnel", response_class=HTMLResponse)
def update_personnel_ui(
    request: Request,
    number: str,
    engineer: Optional[str] = Form(None),
    pump_operator: Optional[str] = Form(None),
    supervisor: Optional[str] = Form(None),
    customer_rep: Optional[str] = Form(None),
    completion_type: Optional[str] = Form(None),
    db: Session = Depends(get_db),
):
    project = crud.get_project_by_number(db, number)
    if not project:
        return RedirectResponse(url="/ui", status_code=303)
    try:
        selection = schemas.PersonnelSelection(
            engineer=_blank(engineer),
            pump_operator=_blank(pump_operator),
            supervisor=_blank(supervisor),
            customer_rep=_blank(customer_rep),
            completion_type=_blank(completion_type),
        )
        crud.update_personnel(db, project, selection)
    except ValueError as e:
        # pydantic's ValidationError is a ValueError too
        return templates.TemplateResponse(
            request, "timeline.html", _timeline_context(request, db, project, error=str(e)), status_code=400
        )
    return RedirectResponse(url=f"/ui/projects/{project.number}", status_code=303)


# Health check
@app.get("/health/db")
def health_check(db: Session = Depends(get_db)):
    """Check that the database answers"""
    try:
        db.execute(text("SELECT 1"))
        return {"status": "healthy", "database": "reachable"}
    except Exception:
        log.exception("database_unreachable")
        raise HTTPException(status_code=503, detail="Database connection failed")


@app.get("/")
def read_root():
    """Service status"""
    return {"service": settings.APP_TITLE, "status": "running"}
