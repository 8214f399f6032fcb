from habitlog.schemas.habit import ErrorOut, HabitAddedOut, HabitDeletedOut, HabitOut, HabitToggledOut

__all__ = ["HabitOut", "HabitAddedOut", "HabitToggledOut", "HabitDeletedOut", "ErrorOut"]
