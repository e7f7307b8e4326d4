import logging
from datetime import date, datetime, timezone

import pytest
from pydantic import ValidationError

from chacara.schemas.task import (
    ExactDate,
    SeasonalMonth,
    TaskCreate,
    TaskRead,
    Urgency,
)


def test_create_with_exact_date():
    data = TaskCreate(title="  Plantar milho ", category="planting", specific_date="2024-09-10")
    task = data.build()

    assert task.title == "Plantar milho"
    assert task.anchor == ExactDate(on=date(2024, 9, 10))
    assert task.specific_date == date(2024, 9, 10)
    assert task.month_reference is None
    assert task.is_dated and not task.is_seasonal
    assert task.urgency == Urgency.medium
    assert task.recurrence == "none"
    assert task.is_completed is False
    assert task.created_at.tzinfo is not None


def test_create_seasonal():
    task = TaskCreate(title="Podar", month_reference=7, recurrence="yearly").build()
    assert task.anchor == SeasonalMonth(month=7)
    assert task.is_seasonal
    assert task.recurrence == "yearly"


def test_build_assigns_unique_ids():
    data = TaskCreate(title="x", month_reference=0)
    assert data.build().id != data.build().id


@pytest.mark.parametrize(
    "fields",
    [
        {"specific_date": "2024-06-01", "month_reference": 5},
        {},
    ],
)
def test_exactly_one_anchor_required(fields):
    with pytest.raises(ValidationError):
        TaskCreate(title="x", **fields)


@pytest.mark.parametrize("title", ["", "   "])
def test_blank_title_rejected(title):
    with pytest.raises(ValidationError):
        TaskCreate(title=title, month_reference=1)


@pytest.mark.parametrize("month", [-1, 12])
def test_month_reference_range(month):
    with pytest.raises(ValidationError):
        TaskCreate(title="x", month_reference=month)


def test_unknown_category_rejected():
    with pytest.raises(ValidationError):
        TaskCreate(title="x", month_reference=1, category="irrigation")


def test_task_is_immutable():
    task = TaskCreate(title="x", month_reference=1).build()
    with pytest.raises(ValidationError):
        task.is_completed = True


def test_toggle_twice_is_identity():
    task = TaskCreate(title="x", specific_date="2024-06-01").build()
    assert task.toggled().is_completed
    assert task.toggled().toggled() == task


def test_record_round_trip():
    task = TaskCreate(title="Vacinar", category="animals", urgency="high", month_reference=3).build()
    assert TaskRead.from_task(task).to_task() == task


def _record(**overrides) -> dict:
    base = {
        "id": "t1",
        "title": "Legado",
        "category": "general",
        "created_at": datetime(2023, 5, 1, tzinfo=timezone.utc),
    }
    base.update(overrides)
    return base


def test_record_without_urgency_defaults_to_medium():
    record = TaskRead.model_validate(_record(urgency=None, recurrence=None, month_reference=2))
    task = record.to_task()
    assert task.urgency == Urgency.medium
    assert task.recurrence == "none"
    assert task.anchor == SeasonalMonth(month=2)


@pytest.mark.parametrize(
    "fields",
    [
        {"specific_date": date(2024, 6, 1), "month_reference": 5},
        {},
        {"month_reference": 14},
    ],
)
def test_malformed_record_loads_without_anchor(fields, caplog):
    with caplog.at_level(logging.WARNING, logger="chacara.schemas.task"):
        task = TaskRead.model_validate(_record(**fields)).to_task()
    assert task.anchor is None
    assert "t1" in caplog.text


def test_unknown_recurrence_survives_record():
    task = TaskRead.model_validate(_record(recurrence="fortnightly", specific_date=date(2024, 6, 1))).to_task()
    assert task.recurrence == "fortnightly"
    assert TaskRead.from_task(task).recurrence == "fortnightly"
