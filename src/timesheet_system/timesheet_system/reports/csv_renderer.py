from __future__ import annotations

import csv
import io

from ..accounting.calculator.duration_calculator import format_duration
from ..accounting.export import ExportData

HEADER = ["Datum", "Tijd / status", "Duur", "Opmerking", "Bonnummer", "Rechtstreeks"]


def render_csv(export: ExportData, *, employee_name: str = "") -> str:
    """Render the export rows and summary block as a semicolon separated sheet."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, delimiter=";")

    writer.writerow([employee_name, export.title])
    writer.writerow(HEADER)
    for r in export.rows:
        writer.writerow([r.date_label, r.time_or_status_label, r.duration_label, r.comment, r.bonnummer, r.rechtstreeks])

    s = export.summary
    writer.writerow([])
    writer.writerow(["Totaal", format_duration(s.total_minutes)])
    if s.net_minutes != s.total_minutes:
        writer.writerow(["Totaal na reistijd", format_duration(s.net_minutes)])
    writer.writerow(["Gewerkte dagen", s.worked_days])
    writer.writerow(["Nachturen", format_duration(s.night_minutes)])
    writer.writerow(["Zondaguren", format_duration(s.sunday_minutes)])
    return buffer.getvalue()
