from __future__ import annotations

import csv
import io
from typing import Sequence

import pandas as pd

from ..service_charge.model import round_currency
from .model import PayrollRecord

EXPORT_COLUMNS = [
    "Staff",
    "Position",
    "Rate",
    "Regular Hrs",
    "OT Hrs",
    "Total Hrs",
    "Regular Pay",
    "OT Pay",
    "Service Charge",
    "Gross Pay",
    "Deductions",
    "Custom Deduction",
    "Net Pay",
    "Present",
    "Absent",
    "Late",
    "Notes",
]


def to_rows(records: Sequence[PayrollRecord]) -> list[dict]:
    rows = []
    for r in records:
        rows.append(
            {
                "Staff": r.employee,
                "Position": r.position,
                "Rate": round_currency(r.rate),
                "Regular Hrs": round(r.regular_hours, 2),
                "OT Hrs": round(r.overtime_hours, 2),
                "Total Hrs": round(r.total_hours, 2),
                "Regular Pay": round_currency(r.regular_pay),
                "OT Pay": round_currency(r.overtime_pay),
                "Service Charge": round_currency(r.service_charge),
                "Gross Pay": round_currency(r.gross_pay),
                "Deductions": round_currency(r.deductions.total),
                "Custom Deduction": round_currency(r.custom_deduction),
                "Net Pay": round_currency(r.net_pay),
                "Present": r.days_present,
                "Absent": r.days_absent,
                "Late": r.days_late,
                "Notes": r.deduction_notes,
            }
        )
    return rows


def to_csv_bytes(records: Sequence[PayrollRecord]) -> bytes:
    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=EXPORT_COLUMNS)
    writer.writeheader()
    writer.writerows(to_rows(records))
    # BOM so Excel opens the file as UTF-8.
    return out.getvalue().encode("utf-8-sig")


def to_dataframe(records: Sequence[PayrollRecord]) -> pd.DataFrame:
    return pd.DataFrame(to_rows(records), columns=EXPORT_COLUMNS)


def to_xlsx_bytes(records: Sequence[PayrollRecord]) -> bytes:
    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        to_dataframe(records).to_excel(writer, index=False, sheet_name="Payroll")
    return out.getvalue()
