"""Quick validation script for the project store.

Run with `python -m scripts.validate_store` to check that the configured
Supabase table is reachable and that its rows are usable by the dashboard.
"""

from __future__ import annotations

from collections import Counter

import nepatrack.bootstrap_env  # noqa: F401  loads .env / secrets
from nepatrack.data.loader import FetchError, load_projects, records_to_frame
from nepatrack.logging_config import setup_logging
from nepatrack.ui.components.project_map import mappable_projects


def main() -> None:
    setup_logging()
    try:
        records = load_projects()
    except FetchError as exc:
        raise SystemExit(f"Fetch failed ({exc.kind}): {exc}")

    frame = records_to_frame(records)
    unmapped = len(records) - len(mappable_projects(records))
    unknown = Counter(r.status for r in records if not r.has_known_status)

    print("Rows:", len(frame))
    print("Categories:", ", ".join(sorted(frame["category"].dropna().unique())) or "-")
    print("Without usable coordinates:", unmapped)
    if unknown:
        print("Unknown statuses:", dict(unknown))
    missing = frame[["budget", "start_date", "end_date", "description"]].isna().sum()
    print("Missing optional fields:")
    print(missing.to_string())


if __name__ == "__main__":
    main()
