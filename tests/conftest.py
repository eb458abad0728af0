"""Pytest configuration and shared fixtures for report_tables tests."""

import polars as pl
import pytest

from report_tables import INDEX_NB_VISITS, DataTable, MetricMapping, Row
from report_tables.core.metrics import INDEX_NB_ACTIONS


@pytest.fixture
def mapping() -> MetricMapping:
    """Standard metric mapping."""
    return MetricMapping.default()


@pytest.fixture
def visits_table() -> DataTable:
    """Flat table keyed by metric names, as built by report code."""
    return DataTable.from_records([
        {"label": "Germany", "nb_visits": 7, "nb_actions": 20},
        {"label": "France", "nb_visits": 14, "nb_actions": 30},
        {"label": "Japan", "nb_visits": 3, "nb_actions": 50},
        {"label": "Brazil", "nb_visits": 9, "nb_actions": 10},
    ])


@pytest.fixture
def archived_table() -> DataTable:
    """Same data keyed by metric ids, as stored by the archiver."""
    return DataTable.from_records([
        {"label": "Germany", INDEX_NB_VISITS: 7, INDEX_NB_ACTIONS: 20},
        {"label": "France", INDEX_NB_VISITS: 14, INDEX_NB_ACTIONS: 30},
        {"label": "Japan", INDEX_NB_VISITS: 3, INDEX_NB_ACTIONS: 50},
        {"label": "Brazil", INDEX_NB_VISITS: 9, INDEX_NB_ACTIONS: 10},
    ])


@pytest.fixture
def country_city_table() -> DataTable:
    """Two-level table: countries, each owning a table of cities."""
    france = Row(
        {"label": "France", "nb_visits": 14},
        subtable=DataTable.from_records([
            {"label": "Lyon", "nb_visits": 4},
            {"label": "Paris", "nb_visits": 8},
            {"label": "Nice", "nb_visits": 2},
        ]),
    )
    germany = Row(
        {"label": "Germany", "nb_visits": 20},
        subtable=DataTable.from_records([
            {"label": "Munich", "nb_visits": 5},
            {"label": "Berlin", "nb_visits": 15},
        ]),
    )
    japan = Row({"label": "Japan", "nb_visits": 6})
    return DataTable([france, japan, germany])


@pytest.fixture
def visits_frame() -> pl.DataFrame:
    """Flat visit log with country and city dimensions."""
    return pl.DataFrame({
        "country": ["France", "France", "Germany", "France", "Germany"],
        "city": ["Paris", "Lyon", "Berlin", "Nice", "Munich"],
        "nb_visits": [8, 4, 15, 2, 5],
        "nb_actions": [20, 9, 40, 3, 12],
    })
