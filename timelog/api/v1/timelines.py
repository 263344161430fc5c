from typing import Optional
from urllib.parse import quote

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response
from sqlalchemy.orm import Session

from ... import crud, schemas
from ...core import presenters
from ...database.connection import get_db
from ...utils.csv_export import export_filename, operations_to_csv, operations_to_legacy_csv
from .deps import get_project_or_404, well_names

router = APIRouter()


def _csv_response(content: str, filename: str) -> Response:
    # headers are latin-1; non-ASCII names go in the RFC 5987 filename* form
    fallback = filename.encode("ascii", "ignore").decode("ascii").replace('"', "") or "timeline.csv"
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename)}"},
    )


def _load(db: Session, number: str):
    project = get_project_or_404(db, number)
    return project, crud.list_operations(db, project.id)


@router.get("/{number}/timeline/feed", response_model=schemas.FeedView)
def feed_endpoint(number: str, db: Session = Depends(get_db)):
    """Chronological feed grouped by start time"""
    project, operations = _load(db, number)
    return presenters.feed(operations, well_names(project))


@router.get("/{number}/timeline/sectors", response_model=schemas.SectorView)
def sector_endpoint(number: str, sector: Optional[str] = Query(None), db: Session = Depends(get_db)):
    project, operations = _load(db, number)
    return presenters.sector_view(operations, well_names(project), sector, crud.used_sectors(project))


@router.get("/{number}/timeline/wells", response_model=schemas.WellView)
def well_endpoint(number: str, well_id: Optional[str] = Query(None), db: Session = Depends(get_db)):
    project, operations = _load(db, number)
    return presenters.well_view(operations, well_names(project), well_id)


@router.get("/{number}/timeline/table", response_model=schemas.TableView)
def table_endpoint(number: str, db: Session = Depends(get_db)):
    project, operations = _load(db, number)
    return presenters.table(operations, well_names(project))


@router.get("/{number}/timeline/feed.csv")
def feed_csv(number: str, db: Session = Depends(get_db)):
    _, operations = _load(db, number)
    return _csv_response(operations_to_csv(operations), export_filename("feed"))


@router.get("/{number}/timeline/sectors.csv")
def sector_csv(number: str, sector: Optional[str] = Query(None), db: Session = Depends(get_db)):
    project, operations = _load(db, number)
    view = presenters.sector_view(operations, well_names(project), sector, crud.used_sectors(project))
    shown_ids = {entry.id for entry in view.operations}
    shown = [op for op in operations if op.id in shown_ids]
    return _csv_response(operations_to_csv(shown), export_filename("sector", view.sector or "sector"))


@router.get("/{number}/timeline/wells.csv")
def well_csv(number: str, well_id: Optional[str] = Query(None), db: Session = Depends(get_db)):
    project, operations = _load(db, number)
    names = well_names(project)
    view = presenters.well_view(operations, names, well_id)
    shown = [op for op in operations if op.well_id == view.well_id]
    return _csv_response(operations_to_csv(shown), export_filename("well", names.get(view.well_id, view.well_id or "well")))


@router.get("/{number}/timeline/table.csv")
def table_csv(number: str, db: Session = Depends(get_db)):
    project, operations = _load(db, number)
    return _csv_response(operations_to_legacy_csv(operations, well_names(project)), export_filename("table"))
