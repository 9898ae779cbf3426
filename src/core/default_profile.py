"""Built-in report profile.

The correction values below were identified by manual inspection of the
JHU CSSE series against Sante publique France figures. Indices are day
offsets from the first JHU column (2020-01-22); the comment on each row
is the calendar day being patched.
"""

from __future__ import annotations

from datetime import date

from core.types import Correction, MetricSettings, ReportProfile

DEFAULT_ENTITIES = (
    "France",
    "Italy",
    "Spain",
    "Germany",
    "US",
    "United Kingdom",
)

DEFAULT_METRICS = {
    "confirmed": MetricSettings(cutoff=100.0),
    "deaths": MetricSettings(cutoff=10.0),
}

DEFAULT_EVENTS = {
    "Italy": date(2020, 2, 27),  # lockdown of northern regions
    "France": date(2020, 3, 17),
    "United Kingdom": date(2020, 3, 23),
}

DEFAULT_CORRECTIONS = {
    "deaths": (
        Correction("France", 47, 30.0, "2020-03-09"),
        Correction("France", 55, 175.0, "2020-03-17"),
        Correction("France", 56, 244.0, "2020-03-18"),
        Correction("France", 57, 372.0, "2020-03-19"),
        # 2020-04-02 (4503) was actually correct: it includes the EHPAD death toll.
    ),
    "confirmed": (
        Correction("France", 73, 68605.0, "2020-04-04"),
        Correction("France", 74, 70478.0, "2020-04-05"),
        Correction("France", 75, 74390.0, "2020-04-06"),
        Correction("France", 76, 78167.0, "2020-04-07"),
        Correction("France", 77, 82048.0, "2020-04-08"),
        Correction("France", 78, 86344.0, "2020-04-09"),
        Correction("France", 79, 90676.0, "2020-04-10"),
        Correction("France", 80, 93790.0, "2020-04-11"),
        Correction("France", 81, 95403.0, "2020-04-12"),
        Correction("France", 82, 98076.0, "2020-04-13"),
        Correction("France", 83, 103573.0, "2020-04-14"),
        Correction("France", 84, 106206.0, "2020-04-15"),
        Correction("France", 85, 108847.0, "2020-04-16"),
        Correction("France", 86, 109252.0, "2020-04-17"),
        Correction("France", 87, 111821.0, "2020-04-18"),
        Correction("France", 88, 112606.0, "2020-04-19"),
        Correction("France", 89, 114657.0, "2020-04-20"),
        Correction("France", 90, 117324.0, "2020-04-21"),
    ),
}


def default_profile() -> ReportProfile:
    """Return the built-in JHU global report profile."""
    return ReportProfile(
        entities=DEFAULT_ENTITIES,
        metrics=dict(DEFAULT_METRICS),
        events=dict(DEFAULT_EVENTS),
        corrections=dict(DEFAULT_CORRECTIONS),
    )
