"""Shared fixtures for dashboard tests."""

from __future__ import annotations

import datetime as dt

import pytest

from nepatrack.data.models import ProjectRecord


def make_record(**overrides) -> ProjectRecord:
    fields = {
        "id": "p-1",
        "title": "Project",
        "location": "Kathmandu",
        "status": "Planning",
        "category": "Road",
        "latitude": 27.7172,
        "longitude": 85.324,
    }
    fields.update(overrides)
    return ProjectRecord(**fields)


@pytest.fixture
def record_factory():
    return make_record


@pytest.fixture
def scenario_records():
    """The two-record scenario used throughout the filter tests."""
    return [
        make_record(id="a", title="Bridge A", status="Completed", category="Bridge", location="Kathmandu"),
        make_record(id="b", title="Road B", status="Planning", category="Road", location="Pokhara"),
    ]


@pytest.fixture
def mixed_records():
    return [
        make_record(
            id="1",
            title="Melamchi Water Supply",
            location="Sindhupalchok",
            description="Tunnel carrying water to the Kathmandu valley",
            status="In Progress",
            category="Water",
            budget=35_000_000_000,
            start_date=dt.date(2000, 1, 1),
        ),
        make_record(
            id="2",
            title="Karnali Bridge",
            location="Chisapani",
            status="Completed",
            category="Bridge",
            latitude=28.64,
            longitude=81.29,
        ),
        make_record(
            id="3",
            title="Mid-Hill Highway",
            location="Baitadi",
            description=None,
            status="On Hold",
            category="Road",
            latitude=None,
            longitude=None,
        ),
        make_record(
            id="4",
            title="Ring Road Upgrade",
            location="Lalitpur",
            description="Widening of the Kathmandu ring road",
            status="In Progress",
            category="Road",
        ),
        make_record(id="5", title="Pilot Scheme", location="Dhangadhi", status="Archived", category="Energy"),
    ]
