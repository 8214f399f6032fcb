from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Date, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from habitlog.models.base import Base

if TYPE_CHECKING:
    from habitlog.models.habit import Habit


class HabitEntry(Base):
    __tablename__ = "habit_entries"
    __table_args__ = (UniqueConstraint("habit_id", "entry_date", name="uq_habit_entry_per_day"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True, autoincrement=True)
    habit_id: Mapped[int] = mapped_column(ForeignKey("habits.id", ondelete="CASCADE"), index=True)
    entry_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    is_completed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    habit: Mapped["Habit"] = relationship(back_populates="entries")
