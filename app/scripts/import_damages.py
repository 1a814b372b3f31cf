"""
Import road damage reports from a JSON file (array of reports or a single report):
  python -m app.scripts.import_damages damages.json [--skip-existing]

Each report uses the dashboard shape:
  {"id": 1, "type": "Pothole", "severity": "High", "location": "Main St",
   "coords": {"lat": 40.71, "lng": -74.0}, "description": "...",
   "reportedDate": "2024-05-01T10:00:00Z", "status": "Pending"}
"""
import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError
from sqlalchemy.orm import Session

from app.core.database import SessionLocal
from app.core.errors import DuplicateKeyError
from app.schemas.damages import DamageCreate
from app.services.damages import create_damage

MAX_REPORTS_PER_FILE = 10_000

logger = logging.getLogger(__name__)


def parse_reports(data: list | dict) -> list[DamageCreate]:
    """Validate a JSON structure into reports; accept a single object or an array."""
    if isinstance(data, dict):
        items = [data]
    elif isinstance(data, list):
        items = data
    else:
        raise ValueError("JSON must be an array of reports or a single report object.")
    if len(items) > MAX_REPORTS_PER_FILE:
        raise ValueError(f"At most {MAX_REPORTS_PER_FILE} reports per file.")
    reports: list[DamageCreate] = []
    for i, item in enumerate(items):
        if not isinstance(item, dict):
            raise ValueError(f"Report at index {i} must be an object.")
        try:
            reports.append(DamageCreate.model_validate(item))
        except ValidationError as e:
            raise ValueError(f"Report at index {i} is invalid: {e}") from e
    return reports


def import_reports(
    db: Session, reports: list[DamageCreate], skip_existing: bool = False
) -> tuple[int, int]:
    """Insert reports in order. Returns (imported, skipped)."""
    imported = skipped = 0
    for report in reports:
        try:
            create_damage(db, report)
            imported += 1
        except DuplicateKeyError:
            if not skip_existing:
                raise
            skipped += 1
    return imported, skipped


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )
    parser = argparse.ArgumentParser(description="Import road damage reports from JSON.")
    parser.add_argument("path", type=Path, help="JSON file with one report or an array")
    parser.add_argument(
        "--skip-existing",
        action="store_true",
        help="Skip reports whose id already exists instead of failing",
    )
    args = parser.parse_args(argv)

    try:
        data = json.loads(args.path.read_text(encoding="utf-8"))
        reports = parse_reports(data)
    except (OSError, json.JSONDecodeError, ValueError) as e:
        print(f"Cannot read {args.path}: {e}", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        imported, skipped = import_reports(db, reports, skip_existing=args.skip_existing)
    except DuplicateKeyError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()
    logger.info("Import completed: imported=%s skipped=%s", imported, skipped)
    return 0


if __name__ == "__main__":
    sys.exit(main())
