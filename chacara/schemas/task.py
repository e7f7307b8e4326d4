"""
Task entity, its date anchor and the flat record shape used on the wire and in stores.

A task is anchored either to an exact calendar date or to a month of the year
(a seasonal task). The anchor is a tagged variant so a new task can never carry
both or neither. Records coming back from a store are flat
(specific_date / month_reference); a record that breaks the "exactly one"
rule still loads, with anchor=None, and stays out of every date-based view.
"""
import logging
from datetime import date, datetime, timezone
from enum import Enum
from typing import Annotated, Literal, Optional, Union
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

logger = logging.getLogger(__name__)


class TaskCategory(str, Enum):
    planting = "planting"
    maintenance = "maintenance"
    animals = "animals"
    general = "general"


class Urgency(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"


class Recurrence(str, Enum):
    none = "none"
    daily = "daily"
    weekly = "weekly"
    monthly = "monthly"
    quarterly = "quarterly"
    semiannual = "semiannual"
    yearly = "yearly"


# ── Anchor ────────────────────────────────────────────────────────────────────


class ExactDate(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["date"] = "date"
    on: date


class SeasonalMonth(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["month"] = "month"
    month: int = Field(ge=0, le=11)  # 0 = January


DateAnchor = Annotated[Union[ExactDate, SeasonalMonth], Field(discriminator="kind")]


# ── Domain entity ─────────────────────────────────────────────────────────────


class Task(BaseModel):
    """Immutable task snapshot. Mutations produce a new instance."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: Optional[str] = None
    is_completed: bool = False
    category: TaskCategory
    urgency: Urgency = Urgency.medium
    # Open set: kinds without a matching rule behave like "none"
    recurrence: str = Recurrence.none.value
    anchor: Optional[DateAnchor] = None
    created_at: datetime

    @property
    def specific_date(self) -> Optional[date]:
        return self.anchor.on if isinstance(self.anchor, ExactDate) else None

    @property
    def month_reference(self) -> Optional[int]:
        return self.anchor.month if isinstance(self.anchor, SeasonalMonth) else None

    @property
    def is_seasonal(self) -> bool:
        return isinstance(self.anchor, SeasonalMonth)

    @property
    def is_dated(self) -> bool:
        return isinstance(self.anchor, ExactDate)

    def with_completion(self, is_completed: bool) -> "Task":
        return self.model_copy(update={"is_completed": is_completed})

    def toggled(self) -> "Task":
        return self.with_completion(not self.is_completed)


# ── Wire / store schemas ──────────────────────────────────────────────────────


class TaskCreate(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    category: TaskCategory = TaskCategory.general
    urgency: Urgency = Urgency.medium
    recurrence: Recurrence = Recurrence.none
    specific_date: Optional[date] = None
    month_reference: Optional[int] = Field(default=None, ge=0, le=11)

    @field_validator("title", mode="before")
    @classmethod
    def _strip_title(cls, v):
        return v.strip() if isinstance(v, str) else v

    @model_validator(mode="after")
    def _exactly_one_anchor(self) -> "TaskCreate":
        has_date = self.specific_date is not None
        has_month = self.month_reference is not None
        if has_date == has_month:
            raise ValueError("exactly one of specific_date or month_reference must be set")
        return self

    def anchor(self) -> Union[ExactDate, SeasonalMonth]:
        if self.specific_date is not None:
            return ExactDate(on=self.specific_date)
        return SeasonalMonth(month=self.month_reference)

    def build(self, task_id: Optional[str] = None, created_at: Optional[datetime] = None) -> Task:
        return Task(
            id=task_id or uuid4().hex,
            title=self.title,
            description=self.description,
            is_completed=False,
            category=self.category,
            urgency=self.urgency,
            recurrence=self.recurrence.value,
            anchor=self.anchor(),
            created_at=created_at or datetime.now(timezone.utc),
        )


class CompletionUpdate(BaseModel):
    is_completed: bool


class TaskRead(BaseModel):
    """Flat task record: the HTTP response body and the persisted shape."""

    id: str
    title: str
    description: Optional[str] = None
    is_completed: bool = False
    category: TaskCategory
    urgency: Urgency = Urgency.medium
    recurrence: str = Recurrence.none.value
    specific_date: Optional[date] = None
    month_reference: Optional[int] = None
    created_at: datetime

    model_config = {"from_attributes": True}

    @field_validator("urgency", mode="before")
    @classmethod
    def _default_urgency(cls, v):
        # Records written before urgency existed carry NULL
        return Urgency.medium if v is None else v

    @field_validator("recurrence", mode="before")
    @classmethod
    def _default_recurrence(cls, v):
        return Recurrence.none.value if v is None else v

    @classmethod
    def from_task(cls, task: Task) -> "TaskRead":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            is_completed=task.is_completed,
            category=task.category,
            urgency=task.urgency,
            recurrence=task.recurrence,
            specific_date=task.specific_date,
            month_reference=task.month_reference,
            created_at=task.created_at,
        )

    def to_task(self) -> Task:
        anchor: Optional[Union[ExactDate, SeasonalMonth]] = None
        if self.specific_date is not None and self.month_reference is None:
            anchor = ExactDate(on=self.specific_date)
        elif self.month_reference is not None and self.specific_date is None:
            if 0 <= self.month_reference <= 11:
                anchor = SeasonalMonth(month=self.month_reference)
            else:
                logger.warning("task %s: month_reference %r out of range", self.id, self.month_reference)
        else:
            logger.warning(
                "task %s: expected exactly one of specific_date/month_reference, "
                "excluding it from date views", self.id,
            )
        return Task(
            id=self.id,
            title=self.title,
            description=self.description,
            is_completed=self.is_completed,
            category=self.category,
            urgency=self.urgency,
            recurrence=self.recurrence,
            anchor=anchor,
            created_at=self.created_at,
        )
