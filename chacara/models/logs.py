from datetime import date, datetime, timezone

from sqlalchemy import Date, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from chacara.db.base import Base


class DailyLogRow(Base):
    __tablename__ = "daily_logs"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    log_date: Mapped[date] = mapped_column(Date, index=True)
    content: Mapped[str] = mapped_column(Text)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
