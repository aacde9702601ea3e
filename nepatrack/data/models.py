"""
Project record model and row coercion for the `projects` table.
"""

from __future__ import annotations

import datetime as dt
import math
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Set

import pandas as pd

SENTINELS: Set[str] = {"", "None", "none", "N/A", "n/a", "NA", "na", "null", "Null", "-", "—"}


class ProjectStatus:
    PLANNING = "Planning"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    ON_HOLD = "On Hold"


KNOWN_STATUSES: List[str] = [
    ProjectStatus.PLANNING,
    ProjectStatus.IN_PROGRESS,
    ProjectStatus.COMPLETED,
    ProjectStatus.ON_HOLD,
]


def _clean_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    text = str(value).strip()
    if text in SENTINELS:
        return None
    return text


def _to_float(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str) and _clean_text(value) is None:
        return None
    numeric = pd.to_numeric(value, errors="coerce")
    if numeric is None or pd.isna(numeric):
        return None
    numeric = float(numeric)
    if not math.isfinite(numeric):
        return None
    return numeric


def _to_date(value: Any) -> Optional[dt.date]:
    if value is None or (isinstance(value, str) and _clean_text(value) is None):
        return None
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    parsed = pd.to_datetime(value, errors="coerce")
    if pd.isna(parsed):
        return None
    # Calendar date as stored; no timezone shift for date-only columns
    return parsed.date()


def _to_timestamp(value: Any) -> Optional[dt.datetime]:
    if value is None or (isinstance(value, str) and _clean_text(value) is None):
        return None
    parsed = pd.to_datetime(value, errors="coerce", utc=True)
    if pd.isna(parsed):
        return None
    return parsed.to_pydatetime()


@dataclass(frozen=True)
class ProjectRecord:
    id: str
    title: str
    location: str
    status: str
    category: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    description: Optional[str] = None
    budget: Optional[float] = None
    contractor: Optional[str] = None
    funding_source: Optional[str] = None
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None
    created_at: Optional[dt.datetime] = None

    @property
    def has_known_status(self) -> bool:
        return self.status in KNOWN_STATUSES

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "ProjectRecord":
        """Build a record from one JSON row returned by the store.

        Optional columns fall back to None; only a missing `id` is an error.
        """
        record_id = _clean_text(row.get("id"))
        if record_id is None:
            raise ValueError("project row is missing an id")

        budget = _to_float(row.get("budget"))
        if budget is not None and budget < 0:
            budget = None

        return cls(
            id=record_id,
            title=_clean_text(row.get("title")) or "",
            location=_clean_text(row.get("location")) or "",
            status=_clean_text(row.get("status")) or "",
            category=_clean_text(row.get("category")) or "",
            latitude=_to_float(row.get("latitude")),
            longitude=_to_float(row.get("longitude")),
            description=_clean_text(row.get("description")),
            budget=budget,
            contractor=_clean_text(row.get("contractor")),
            funding_source=_clean_text(row.get("funding_source")),
            start_date=_to_date(row.get("start_date")),
            end_date=_to_date(row.get("end_date")),
            created_at=_to_timestamp(row.get("created_at")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "location": self.location,
            "status": self.status,
            "category": self.category,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "description": self.description,
            "budget": self.budget,
            "contractor": self.contractor,
            "funding_source": self.funding_source,
            "start_date": self.start_date.isoformat() if self.start_date else None,
            "end_date": self.end_date.isoformat() if self.end_date else None,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
