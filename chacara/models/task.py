from datetime import date, datetime, timezone
from typing import Optional

from sqlalchemy import Boolean, Date, DateTime, Enum, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from chacara.db.base import Base


class TaskRow(Base):
    __tablename__ = "tasks"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    title: Mapped[str] = mapped_column(String(200))
    description: Mapped[Optional[str]] = mapped_column(Text)
    is_completed: Mapped[bool] = mapped_column(Boolean, default=False, server_default="false")

    category: Mapped[str] = mapped_column(
        Enum("planting", "maintenance", "animals", "general", name="task_category_enum"),
        default="general",
    )
    urgency: Mapped[Optional[str]] = mapped_column(
        Enum("low", "medium", "high", name="task_urgency_enum"),
        default="medium",
    )
    # Free-form: unknown kinds must survive a round trip
    recurrence: Mapped[str] = mapped_column(String(20), default="none")

    specific_date: Mapped[Optional[date]] = mapped_column(Date, index=True)
    month_reference: Mapped[Optional[int]] = mapped_column(Integer)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), index=True
    )
