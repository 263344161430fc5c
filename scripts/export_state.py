#!/usr/bin/env python3
"""Export a project snapshot to a JSON file, or restore one into the database.

Usage:
  python3 scripts/export_state.py --project 1001                 # write to STATE_FILE
  python3 scripts/export_state.py --project 1001 --file out.json
  python3 scripts/export_state.py --restore --file out.json
"""
import sys
from pathlib import Path
import argparse

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from timelog.db import SessionLocal, Base, engine
from timelog import crud
from timelog.config import settings
from timelog.core.state import JsonStateRepository, build_state, restore_state


def main():
    parser = argparse.ArgumentParser(description='Export or restore a project state snapshot')
    parser.add_argument("--project", help="project number to export")
    parser.add_argument("--file", default=settings.STATE_FILE)
    parser.add_argument("--restore", action="store_true", help="restore the snapshot instead of exporting")
    args = parser.parse_args()

    Base.metadata.create_all(bind=engine)
    repo = JsonStateRepository(args.file)

    with SessionLocal() as db:
        if args.restore:
            state = repo.load()
            if state is None:
                print(f"No usable snapshot at {args.file}")
                return 1
            project = restore_state(db, state)
            print(f"Restored project {project.number} with {len(state.operations)} operations")
            return 0

        if not args.project:
            parser.error("--project is required when exporting")
        project = crud.get_project_by_number(db, args.project)
        if not project:
            print(f"Project {args.project} not found")
            return 1
        repo.save(build_state(db, project))
        print(f"Wrote {args.file}")
        return 0


if __name__ == '__main__':
    sys.exit(main())
