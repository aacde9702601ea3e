from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Set

import pandas as pd
import requests

from nepatrack.config import StoreSettings
from nepatrack.data.models import ProjectRecord

logger = logging.getLogger(__name__)

FRAME_COLUMNS: List[str] = [
    "id",
    "title",
    "location",
    "status",
    "category",
    "latitude",
    "longitude",
    "description",
    "budget",
    "contractor",
    "funding_source",
    "start_date",
    "end_date",
    "created_at",
]


class FetchError(RuntimeError):
    """Raised when the project table cannot be read.

    `kind` is one of "config", "network", "store" or "payload".
    """

    def __init__(self, message: str, kind: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.status_code = status_code


def _store_error_message(response: requests.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.reason or f"HTTP {response.status_code}"


def _parse_rows(rows: List[Dict[str, Any]]) -> List[ProjectRecord]:
    records: List[ProjectRecord] = []
    seen: Set[str] = set()
    for idx, row in enumerate(rows):
        if not isinstance(row, dict):
            raise FetchError(f"Row {idx} is not an object", kind="payload")
        try:
            record = ProjectRecord.from_row(row)
        except ValueError as exc:
            raise FetchError(f"Row {idx}: {exc}", kind="payload") from exc
        if record.id in seen:
            logger.warning("Dropping duplicate project id %s", record.id)
            continue
        seen.add(record.id)
        records.append(record)
    return records


def fetch_projects(settings: StoreSettings, session: Optional[requests.Session] = None) -> List[ProjectRecord]:
    """Read every row of the projects table, newest first.

    Equivalent to `SELECT * FROM projects ORDER BY created_at DESC`; all
    filtering happens client-side.
    """
    if not settings.url or not settings.api_key:
        raise FetchError(
            "SUPABASE_URL and SUPABASE_ANON_KEY must be set (env or secrets).",
            kind="config",
        )

    headers = {
        "apikey": settings.api_key,
        "Authorization": f"Bearer {settings.api_key}",
        "Accept": "application/json",
    }
    params = {"select": "*", "order": "created_at.desc"}
    http = session or requests
    try:
        response = http.get(settings.endpoint, headers=headers, params=params, timeout=settings.timeout)
    except requests.RequestException as exc:
        raise FetchError(f"Could not reach the project store: {exc}", kind="network") from exc

    if not response.ok:
        raise FetchError(
            f"Project store returned {response.status_code}: {_store_error_message(response)}",
            kind="store",
            status_code=response.status_code,
        )

    try:
        payload = response.json()
    except ValueError as exc:
        raise FetchError("Project store returned a non-JSON body", kind="payload") from exc
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise FetchError("Project store returned an unexpected payload shape", kind="payload")

    return _parse_rows(payload)


def load_projects() -> List[ProjectRecord]:
    """Wrapper that resolves settings from env/secrets and fetches the snapshot."""
    settings = StoreSettings.from_env()
    records = fetch_projects(settings)

    # Basic diagnostics
    missing_coords = sum(1 for r in records if r.latitude is None or r.longitude is None)
    unknown_status = sum(1 for r in records if not r.has_known_status)
    logger.info(
        "Loaded %d projects from %s (missing coordinates: %d, unknown status: %d)",
        len(records),
        settings.table,
        missing_coords,
        unknown_status,
    )
    return records


def records_to_frame(records: List[ProjectRecord]) -> pd.DataFrame:
    """Tabular view of a snapshot, used for CSV export and diagnostics."""
    if not records:
        return pd.DataFrame(columns=FRAME_COLUMNS)
    return pd.DataFrame([r.to_dict() for r in records], columns=FRAME_COLUMNS)
