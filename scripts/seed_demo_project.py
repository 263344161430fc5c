#!/usr/bin/env python3
"""Import a project and log a short demo day of operations.

Usage:
  python3 scripts/seed_demo_project.py --project 1001
  python3 scripts/seed_demo_project.py --project 1001 --start 2025-03-01T06:00

Without upstream credentials the import falls back to the mock pad.
"""
import sys
from datetime import datetime, timedelta
from pathlib import Path
import argparse

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from timelog.db import SessionLocal, Base, engine
from timelog import crud, schemas
from timelog.services.upstream import UpstreamClient

# (minutes after start, well index, type, sector, party, main event)
DEMO_DAY = [
    (0, 0, "NP", "PAD", "LOS", "Safety Meeting"),
    (30, 0, "PUMP", "A", "LOS", "Frac"),
    (30, 1, "NP", "WireLine", "WireLine", "Pump Down"),
    (150, 1, "PUMP", "B", "LOS", "Frac"),
    (170, 0, "NP", "A", "LOS", "Well Swap (Zippering)"),
    (260, 0, "NPT/DT", "PAD", "LOS", "Pump Mechanical Maintenance"),
]


def main():
    parser = argparse.ArgumentParser(description='Import a project and log demo operations')
    parser.add_argument("--project", required=True, help="upstream project number")
    parser.add_argument("--start", default=None, help="ISO start time (default: today 06:00 UTC)")
    args = parser.parse_args()

    start = datetime.fromisoformat(args.start) if args.start else datetime.utcnow().replace(
        hour=6, minute=0, second=0, microsecond=0)

    Base.metadata.create_all(bind=engine)

    with SessionLocal() as db:
        project = crud.import_project(db, UpstreamClient(), args.project)
        wells = [well.well_id for well in project.wells]
        print(f"Imported project {project.number} ({project.name}) with {len(wells)} wells")

        for minutes, well_index, op_type, sector, party, main_event in DEMO_DAY:
            row = schemas.OperationRowCreate(
                well_id=wells[well_index % len(wells)],
                type=op_type,
                sector=sector,
                party=party,
                main_event=main_event,
            )
            batch = schemas.OperationBatchCreate(start_time=start + timedelta(minutes=minutes), operations=[row])
            crud.add_operations(db, project, batch)
        print(f"Logged {len(DEMO_DAY)} operations")


if __name__ == '__main__':
    main()
