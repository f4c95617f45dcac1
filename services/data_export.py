# services/data_export.py

import csv
import io
import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from core.journal import MoodJournal
from core.models import MOOD_INFO, ACTIVITY_INFO

CSV_FIELDS = ["day", "mood", "emoji", "comment", "activities", "energy_level", "sleep_hours", "points"]


def build_export(journal: MoodJournal) -> Dict[str, Any]:
    return {
        "export_date": datetime.now().isoformat(),
        "stats": journal.stats.to_dict(),
        "entries": [e.to_dict() for e in journal.entries.sorted_entries()],
    }


def entries_to_rows(journal: MoodJournal) -> List[Dict[str, Any]]:
    rows = []
    for entry in journal.entries.sorted_entries():
        rows.append({
            "day": entry.day.isoformat(),
            "mood": entry.mood.value,
            "emoji": MOOD_INFO[entry.mood].emoji,
            "comment": entry.comment or "",
            "activities": ";".join(ACTIVITY_INFO[a].name for a in entry.activities),
            "energy_level": int(entry.energy_level) if entry.energy_level is not None else "",
            "sleep_hours": entry.sleep_hours if entry.sleep_hours is not None else "",
            "points": journal.points.points_for_entry(entry),
        })
    return rows


def export_to_json_bytes(journal: MoodJournal) -> bytes:
    return json.dumps(build_export(journal), ensure_ascii=False, indent=2).encode("utf-8")


def export_to_csv_bytes(journal: MoodJournal) -> bytes:
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, CSV_FIELDS)
    writer.writeheader()
    writer.writerows(entries_to_rows(journal))
    return buffer.getvalue().encode("utf-8")


def export_to_json(user_id: int, journal: MoodJournal, export_dir: Path) -> Path:
    export_dir.mkdir(exist_ok=True, parents=True)
    filename = export_dir / f"user_{user_id}_export.json"
    filename.write_bytes(export_to_json_bytes(journal))
    return filename


def export_to_csv(user_id: int, journal: MoodJournal, export_dir: Path) -> Optional[Path]:
    if not journal.entries:
        return None
    export_dir.mkdir(exist_ok=True, parents=True)
    filename = export_dir / f"user_{user_id}_export.csv"
    filename.write_bytes(export_to_csv_bytes(journal))
    return filename
