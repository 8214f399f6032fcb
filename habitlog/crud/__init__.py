from habitlog.crud.habits import (
    HabitToday,
    HabitToggle,
    add_habit,
    count_entries,
    delete_habit,
    list_habits_with_today,
    parse_completed,
    parse_habit_id,
    toggle_habit,
)

__all__ = [
    "HabitToday",
    "HabitToggle",
    "list_habits_with_today",
    "add_habit",
    "toggle_habit",
    "delete_habit",
    "count_entries",
    "parse_habit_id",
    "parse_completed",
]
