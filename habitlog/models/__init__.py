from habitlog.models.base import Base
from habitlog.models.habit import Habit
from habitlog.models.habit_entry import HabitEntry

__all__ = [
    "Base",
    "Habit",
    "HabitEntry",
]
